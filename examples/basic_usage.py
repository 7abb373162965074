"""Basic usage of phpgen.

Builds a small class, an interface and an anonymous class body, and prints
the generated PHP.
"""

import logging

from phpgen import ClassType, Literal, Namespace, render_class


def build_repository(ns: Namespace) -> ClassType:
    """Build a final repository class inside the given namespace."""
    cls = ClassType("UserRepository", ns)
    cls.set_final().set_extends("App\\Model\\BaseRepository").add_implement("\\Countable")
    cls.add_comment("Stores users.")
    cls.add_trait("Nette\\SmartObject")

    cls.add_constant("TABLE", "users").set_visibility("public")
    cls.add_property("logger").set_visibility("private").add_comment("@var LoggerInterface")
    cls.add_property("cache", []).set_visibility("private")

    ctor = cls.add_method("__construct")
    ctor.add_parameter("logger").set_type_hint("Psr\\Log\\LoggerInterface")
    ctor.set_body("$this->logger = $logger;")

    count = cls.add_method("count").set_return_type("int")
    count.set_body("return count($this->cache);")
    return cls


def build_interface() -> ClassType:
    """Build an interface extending two others."""
    cls = ClassType("Repository").set_type("interface")
    cls.set_extends(["\\Countable", "\\IteratorAggregate"])
    find = cls.add_method("find").set_return_type("object", nullable=True)
    find.add_parameter("id").set_type_hint("int")
    return cls


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    ns = Namespace("App\\Model")
    ns.add_use("Nette\\SmartObject")
    ns.add_use("Psr\\Log\\LoggerInterface")

    print(build_repository(ns))
    print(build_interface())

    anonymous = ClassType()
    anonymous.add_constant("CREATED", Literal("PHP_INT_MAX"))
    print("$handler = new class " + render_class(anonymous) + ";")


if __name__ == "__main__":
    main()
