"""phpgen - build PHP class, interface and trait definitions in Python."""

from phpgen.class_type import ClassKind, ClassType, Multiple, Single
from phpgen.config import PrinterConfig
from phpgen.dumper import Literal, dump
from phpgen.exceptions import NotFoundError, ValidationError
from phpgen.members import Constant, Method, Parameter, Property
from phpgen.namespace import Namespace, NameShortener
from phpgen.render import render_class

__version__ = "0.1.0"

__all__ = [
    # Model
    "ClassType",
    "ClassKind",
    "Single",
    "Multiple",
    # Members
    "Constant",
    "Property",
    "Method",
    "Parameter",
    # Rendering
    "render_class",
    "PrinterConfig",
    "Namespace",
    "NameShortener",
    # Literals
    "dump",
    "Literal",
    # Errors
    "ValidationError",
    "NotFoundError",
]
