"""Member models for class types: constants, properties, methods and parameters.

Members are Pydantic models with assignment validation, so a name or a
visibility set after construction is checked just like one passed to the
constructor. Each member renders itself through ``render()``; the class
renderer only arranges the fragments.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import PrinterConfig
from .dumper import validate_dumpable
from .helpers import is_identifier
from .render.members import render_constant, render_method, render_property

if TYPE_CHECKING:
    from .namespace import NameShortener

Visibility = Literal["public", "protected", "private"]

_UNSET: Any = object()


class Member(BaseModel, ABC):
    """Base class for named class members.

    Subclasses implement ``render()``, the fragment the class renderer
    places into the body.

    Example:
        prop = Property(name="count", value=0)
        prop.visibility = "private"
        prop.add_comment("@var int")
    """

    # Re-run name and visibility checks on assignment
    model_config = ConfigDict(validate_assignment=True)

    name: str
    comment: str | None = None

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        if not is_identifier(value):
            raise ValueError(f"Value '{value}' is not valid name.")
        return value

    def get_name(self) -> str:
        return self.name

    def set_comment(self, comment: str | None) -> Self:
        self.comment = comment
        return self

    def add_comment(self, line: str) -> Self:
        """Append a line to the doc comment."""
        self.comment = (self.comment + "\n" if self.comment else "") + line
        return self

    @abstractmethod
    def render(self, shortener: NameShortener | None = None, config: PrinterConfig | None = None) -> str:
        """Render this member as a PHP fragment."""


class Constant(Member):
    """Class constant.

    Rendered as ``[<visibility> ]const NAME = <value>;``.
    """

    value: Any = None
    visibility: Visibility | None = None

    @field_validator("value")
    @classmethod
    def check_value(cls, value: Any) -> Any:
        return validate_dumpable(value)

    def set_value(self, value: Any) -> Self:
        self.value = value
        return self

    def set_visibility(self, visibility: Visibility | None) -> Self:
        self.visibility = visibility
        return self

    def render(self, shortener: NameShortener | None = None, config: PrinterConfig | None = None) -> str:
        return render_constant(self, config)


class Property(Member):
    """Class property (name without ``$``).

    A ``None`` value means the property has no default and the ``= ...``
    segment is left out; any other value, including ``0`` or ``""``, renders.
    """

    value: Any = None
    static: bool = False
    visibility: Visibility | None = None

    @field_validator("value")
    @classmethod
    def check_value(cls, value: Any) -> Any:
        return validate_dumpable(value)

    def set_value(self, value: Any) -> Self:
        self.value = value
        return self

    def set_static(self, state: bool = True) -> Self:
        self.static = state
        return self

    def set_visibility(self, visibility: Visibility | None) -> Self:
        self.visibility = visibility
        return self

    def render(self, shortener: NameShortener | None = None, config: PrinterConfig | None = None) -> str:
        return render_property(self, config)


class Parameter(BaseModel):
    """Method parameter (name without ``$``)."""

    model_config = ConfigDict(validate_assignment=True)

    name: str
    type_hint: str | None = None
    nullable: bool = False
    reference: bool = False
    default_value: Any = None
    has_default_value: bool = False

    @field_validator("default_value")
    @classmethod
    def check_default_value(cls, value: Any) -> Any:
        return validate_dumpable(value)

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        if not is_identifier(value):
            raise ValueError(f"Value '{value}' is not valid name.")
        return value

    def set_type_hint(self, type_hint: str | None) -> Self:
        self.type_hint = type_hint
        return self

    def set_nullable(self, state: bool = True) -> Self:
        self.nullable = state
        return self

    def set_reference(self, state: bool = True) -> Self:
        self.reference = state
        return self

    def set_default_value(self, value: Any) -> Self:
        """Set a default; ``None`` is a real default here and renders as ``null``."""
        self.default_value = value
        self.has_default_value = True
        return self


class Method(Member):
    """Class or interface method.

    A ``None`` body marks the method bodiless (interface or abstract
    signature); an empty string is an empty body ``{}``.
    """

    parameters: dict[str, Parameter] = Field(default_factory=dict)
    body: str | None = ""
    static: bool = False
    final: bool = False
    abstract: bool = False
    visibility: Visibility | None = None
    return_type: str | None = None
    return_nullable: bool = False
    return_reference: bool = False
    variadic: bool = False

    def set_body(self, code: str | None) -> Self:
        self.body = code
        return self

    def add_body(self, code: str) -> Self:
        """Append a line of code to the body."""
        self.body = (self.body or "") + code + "\n"
        return self

    def add_parameter(self, name: str, default: Any = _UNSET) -> Parameter:
        """Add a parameter, optionally with a default value.

        Args:
            name: Parameter name without ``$``
            default: Optional default value; pass ``None`` for ``= null``

        Returns:
            The new parameter for further configuration
        """
        param = Parameter(name=name)
        if default is not _UNSET:
            param.set_default_value(default)
        parameters = dict(self.parameters)
        parameters[name] = param
        self.parameters = parameters
        return param

    def get_parameters(self) -> list[Parameter]:
        return list(self.parameters.values())

    def set_static(self, state: bool = True) -> Self:
        self.static = state
        return self

    def set_final(self, state: bool = True) -> Self:
        self.final = state
        return self

    def set_abstract(self, state: bool = True) -> Self:
        self.abstract = state
        return self

    def set_visibility(self, visibility: Visibility | None) -> Self:
        self.visibility = visibility
        return self

    def set_return_type(self, type_name: str | None, nullable: bool = False) -> Self:
        self.return_type = type_name
        self.return_nullable = nullable
        return self

    def set_variadic(self, state: bool = True) -> Self:
        self.variadic = state
        return self

    def has_body(self) -> bool:
        return self.body is not None and not self.abstract

    def render(self, shortener: NameShortener | None = None, config: PrinterConfig | None = None) -> str:
        return render_method(self, shortener, config)
