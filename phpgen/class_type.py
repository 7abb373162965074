"""Class, interface and trait definitions."""

from __future__ import annotations

import logging
import weakref
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from .dumper import validate_dumpable
from .exceptions import ValidationError
from .helpers import is_identifier, is_namespace_identifier
from .member_map import MemberMap
from .members import Constant, Method, Property
from .render import render_class

if TYPE_CHECKING:
    from .namespace import Namespace

logger = logging.getLogger(__name__)


class ClassKind(str, Enum):
    """Kind of type declaration."""

    CLASS = "class"
    INTERFACE = "interface"
    TRAIT = "trait"


@dataclass(frozen=True)
class Single:
    """One supertype, as in ``class Foo extends Bar``."""

    name: str

    def as_list(self) -> list[str]:
        return [self.name]


@dataclass(frozen=True)
class Multiple:
    """Several supertypes, as in ``interface Foo extends Bar, Baz``."""

    names: tuple[str, ...] = ()

    def as_list(self) -> list[str]:
        return list(self.names)


type Supertypes = Single | Multiple


class ClassType:
    """Model of a class, interface or trait.

    The model is built through its accessors and turned into PHP code by
    ``render_class()`` (or ``str()``). Every setter validates its input
    completely before changing anything, so a rejected call leaves the
    model as it was.

    Example:
        cls = ClassType("Demo")
        cls.set_final().add_extend("ParentClass").add_implement("Countable")
        cls.add_constant("ID", 123)
        cls.add_property("items", [])
        cls.add_method("count").set_body("return count($this->items);")
        print(cls)
    """

    def __init__(self, name: str | None = None, namespace: Namespace | None = None):
        """Initialize a class type.

        Args:
            name: Bare class name, or None for an anonymous class body
            namespace: Enclosing namespace used to shorten names when rendering;
                held by weak reference
        """
        self._name: str | None = None
        self.set_name(name)
        self._namespace = weakref.ref(namespace) if namespace is not None else None
        self._kind = ClassKind.CLASS
        self._final = False
        self._abstract = False
        self._extends: Supertypes = Multiple()
        self._implements: list[str] = []
        self._traits: dict[str, list[str]] = {}
        self._consts: MemberMap[Constant] = MemberMap("Constant")
        self._properties: MemberMap[Property] = MemberMap("Property")
        self._methods: MemberMap[Method] = MemberMap("Method")
        self._comment: str | None = None

    def __str__(self) -> str:
        return render_class(self)

    def __repr__(self) -> str:
        return f"ClassType({self._kind.value} {self._name!r})"

    def get_namespace(self) -> Namespace | None:
        """Return the enclosing namespace, if it is still alive."""
        return self._namespace() if self._namespace is not None else None

    # ------------------------------------------------------------------
    # Identity and modifiers
    # ------------------------------------------------------------------

    def set_name(self, name: str | None) -> ClassType:
        if name is not None and not is_identifier(name):
            raise ValidationError(f"Value '{name}' is not valid class name.")
        self._name = name
        return self

    def get_name(self) -> str | None:
        return self._name

    def set_type(self, kind: ClassKind | str) -> ClassType:
        """Set the declaration kind: class, interface or trait."""
        try:
            self._kind = ClassKind(kind)
        except ValueError:
            raise ValidationError("Argument must be class|interface|trait.") from None
        return self

    def get_type(self) -> ClassKind:
        return self._kind

    def set_final(self, state: bool = True) -> ClassType:
        self._final = state
        return self

    def is_final(self) -> bool:
        return self._final

    def set_abstract(self, state: bool = True) -> ClassType:
        self._abstract = state
        return self

    def is_abstract(self) -> bool:
        return self._abstract

    def set_comment(self, comment: str | None) -> ClassType:
        self._comment = comment
        return self

    def get_comment(self) -> str | None:
        return self._comment

    def add_comment(self, line: str) -> ClassType:
        """Append a line to the doc comment."""
        self._comment = (self._comment + "\n" if self._comment else "") + line
        return self

    # ------------------------------------------------------------------
    # Inheritance and traits
    # ------------------------------------------------------------------

    def set_extends(self, names: str | list[str] | tuple[str, ...]) -> ClassType:
        """Set the supertype(s).

        Args:
            names: A single name (class) or a list of names (interface)
        """
        if isinstance(names, str):
            self._validate([names])
            self._extends = Single(names)
        elif isinstance(names, (list, tuple)):
            self._validate(names)
            self._extends = Multiple(tuple(names))
        else:
            raise ValidationError("Argument must be string or string[].")
        return self

    def get_extends(self) -> str | list[str]:
        """Return the supertype as set: a string for one, a list for many."""
        if isinstance(self._extends, Single):
            return self._extends.name
        return self._extends.as_list()

    @property
    def supertypes(self) -> Supertypes:
        return self._extends

    def add_extend(self, name: str) -> ClassType:
        """Append a supertype, turning a single one into a list."""
        self._validate([name])
        self._extends = Multiple((*self._extends.as_list(), name))
        return self

    def set_implements(self, names: Iterable[str]) -> ClassType:
        names = self._as_name_list(names)
        self._validate(names)
        self._implements = names
        return self

    def get_implements(self) -> list[str]:
        return list(self._implements)

    def add_implement(self, name: str) -> ClassType:
        self._validate([name])
        self._implements.append(name)
        return self

    def set_traits(self, names: Iterable[str]) -> ClassType:
        """Replace all trait uses; each starts without resolutions."""
        names = self._as_name_list(names)
        self._validate(names)
        self._traits = {name: [] for name in names}
        return self

    def get_traits(self) -> list[str]:
        return list(self._traits)

    def get_trait_resolutions(self) -> dict[str, list[str]]:
        """Return trait names mapped to their conflict-resolution directives."""
        return {name: list(resolutions) for name, resolutions in self._traits.items()}

    def add_trait(self, name: str, resolutions: Iterable[str] = ()) -> ClassType:
        """Use a trait, optionally with resolution directives.

        Args:
            name: Trait name, namespace-qualified names allowed
            resolutions: Directives such as ``sayHello as protected``, emitted verbatim
        """
        self._validate([name])
        if isinstance(resolutions, str):
            raise ValidationError("Resolutions must be string[], not a single string.")
        resolutions = list(resolutions)
        for resolution in resolutions:
            if not isinstance(resolution, str):
                raise ValidationError(f"Trait resolution must be string, got {type(resolution).__name__}.")
        self._traits[name] = resolutions
        return self

    # ------------------------------------------------------------------
    # Constants
    # ------------------------------------------------------------------

    def set_constants(self, consts: Mapping[str, Any] | Iterable[Constant]) -> ClassType:
        """Replace all constants.

        Accepts Constant instances or a mapping of name to Constant or raw
        value. Entries are stored under the constant's own name, so a later
        entry with the same name replaces an earlier one.
        """
        items = consts.items() if isinstance(consts, Mapping) else ((None, v) for v in consts)
        new_consts: dict[str, Constant] = {}
        for key, value in items:
            if isinstance(value, Constant):
                const = value
            elif key is None:
                raise ValidationError("Argument must be Constant[] or a mapping of names to values.")
            else:
                self._validate_member_name(key)
                const = Constant(name=key, value=validate_dumpable(value))
            new_consts[const.name] = const

        self._consts.replace(new_consts)
        logger.debug(f"Set {len(new_consts)} constants on {self!r}")
        return self

    def get_constants(self) -> dict[str, Constant]:
        return self._consts.to_dict()

    def get_constant(self, name: str) -> Constant:
        return self._consts.get(name)

    def add_constant(self, name: str, value: Any) -> Constant:
        """Create a constant and return it for further configuration."""
        self._validate_member_name(name)
        validate_dumpable(value)
        return self._consts.upsert(name, Constant(name=name, value=value))

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    def set_properties(self, props: Iterable[Property]) -> ClassType:
        """Replace all properties with the given Property instances."""
        if isinstance(props, Mapping):
            props = props.values()
        new_props: dict[str, Property] = {}
        for prop in props:
            if not isinstance(prop, Property):
                raise ValidationError(f"Argument must be Property[], got {type(prop).__name__}.")
            new_props[prop.name] = prop

        self._properties.replace(new_props)
        logger.debug(f"Set {len(new_props)} properties on {self!r}")
        return self

    def get_properties(self) -> dict[str, Property]:
        return self._properties.to_dict()

    def get_property(self, name: str) -> Property:
        """Return the property with the given name (without ``$``).

        Raises:
            NotFoundError: If the property does not exist
        """
        return self._properties.get(name)

    def add_property(self, name: str, value: Any = None) -> Property:
        """Create a property and return it for further configuration.

        Args:
            name: Property name without ``$``
            value: Default value; None leaves the property without a default
        """
        self._validate_member_name(name)
        validate_dumpable(value)
        return self._properties.upsert(name, Property(name=name, value=value))

    # ------------------------------------------------------------------
    # Methods
    # ------------------------------------------------------------------

    def set_methods(self, methods: Iterable[Method]) -> ClassType:
        """Replace all methods with the given Method instances."""
        if isinstance(methods, Mapping):
            methods = methods.values()
        new_methods: dict[str, Method] = {}
        for method in methods:
            if not isinstance(method, Method):
                raise ValidationError(f"Argument must be Method[], got {type(method).__name__}.")
            new_methods[method.name] = method

        self._methods.replace(new_methods)
        logger.debug(f"Set {len(new_methods)} methods on {self!r}")
        return self

    def get_methods(self) -> dict[str, Method]:
        return self._methods.to_dict()

    def get_method(self, name: str) -> Method:
        """Return the method with the given name.

        Raises:
            NotFoundError: If the method does not exist
        """
        return self._methods.get(name)

    def add_method(self, name: str) -> Method:
        """Create a method and return it for further configuration.

        Interface methods are created without a body; class and trait
        methods default to public visibility.
        """
        self._validate_member_name(name)
        method = Method(name=name)
        if self._kind is ClassKind.INTERFACE:
            method.body = None
        else:
            method.visibility = "public"
        return self._methods.upsert(name, method)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def _validate(names: Iterable[str]) -> None:
        for name in names:
            if not is_namespace_identifier(name, allow_leading_slash=True):
                raise ValidationError(f"Value '{name}' is not valid namespace-qualified class name.")

    @staticmethod
    def _as_name_list(names: Iterable[str]) -> list[str]:
        if isinstance(names, str):
            raise ValidationError("Argument must be string[].")
        return list(names)

    @staticmethod
    def _validate_member_name(name: str) -> None:
        if not is_identifier(name):
            raise ValidationError(f"Value '{name}' is not valid member name.")
