"""Parse .def model definitions and generate Dart model classes and message codecs."""

__version__ = "0.1.0"