"""Tests for class layout rendering."""

from __future__ import annotations

from phpgen import ClassType, Literal, Namespace, PrinterConfig, render_class


def _lines(*lines: str) -> str:
    return "\n".join(lines)


class TestAnonymous:
    """Tests for anonymous class bodies."""

    def test_empty_body(self) -> None:
        """Render an anonymous empty class as bare braces."""
        assert render_class(ClassType()) == "{\n}"

    def test_members_without_trailing_newline(self) -> None:
        """Render an anonymous body without a trailing newline."""
        cls = ClassType()
        cls.add_property("x")
        assert render_class(cls) == "{\n\tpublic $x;\n}"

    def test_extends_stays_on_brace_line(self) -> None:
        """Keep extends and implements on the brace line when anonymous."""
        cls = ClassType().set_extends("Foo").add_implement("Bar")
        assert render_class(cls) == "extends Foo implements Bar {\n}"


class TestNamed:
    """Tests for named class, interface and trait output."""

    def test_empty_class(self) -> None:
        """Render an empty named class."""
        assert render_class(ClassType("Foo")) == "class Foo\n{\n}\n"

    def test_str_renders(self) -> None:
        """Render through str()."""
        assert str(ClassType("Foo")) == "class Foo\n{\n}\n"

    def test_full_class(self) -> None:
        """Render every section of a class in order."""
        cls = ClassType("Example")
        cls.set_abstract().set_final().set_extends("ParentClass")
        cls.add_implement("IExample").add_implement("IOne")
        cls.add_comment("Description of class.").add_comment("This is example")
        cls.add_trait("ObjectTrait")
        cls.add_trait("AnotherTrait", ["sayHello as protected"])
        cls.add_constant("ROLE", "admin").add_comment("Commented")
        cls.add_constant("ACTIVE", False)
        cls.add_property("handle").set_visibility("private").add_comment("@var resource")
        cls.add_property("order", Literal("RecursiveIteratorIterator::SELF_FIRST"))
        cls.add_property("sections", {"first": True}).set_static()
        cls.add_method("getHandle").add_comment("Returns file handle.").set_final().set_body(
            "return $this->handle;"
        )
        cls.add_method("count").set_return_type("int").set_body("return 0;")

        assert render_class(cls) == _lines(
            "/**",
            " * Description of class.",
            " * This is example",
            " */",
            "abstract final class Example extends ParentClass implements IExample, IOne",
            "{",
            "\tuse ObjectTrait;",
            "\tuse AnotherTrait {",
            "\t\tsayHello as protected;",
            "\t}",
            "",
            "\t/** Commented */",
            "\tconst ROLE = 'admin';",
            "\tconst ACTIVE = false;",
            "",
            "\t/** @var resource */",
            "\tprivate $handle;",
            "",
            "\tpublic $order = RecursiveIteratorIterator::SELF_FIRST;",
            "",
            "\tpublic static $sections = ['first' => true];",
            "",
            "",
            "\t/**",
            "\t * Returns file handle.",
            "\t */",
            "\tfinal public function getHandle()",
            "\t{",
            "\t\treturn $this->handle;",
            "\t}",
            "",
            "",
            "\tpublic function count(): int",
            "\t{",
            "\t\treturn 0;",
            "\t}",
            "}",
            "",
        )

    def test_interface(self) -> None:
        """Render an interface with several supertypes and a bodiless method."""
        cls = ClassType("IFoo").set_type("interface").set_extends(["A", "B"])
        cls.add_constant("VERSION", 2).set_visibility("public")
        cls.add_method("m").add_parameter("value").set_type_hint("string")

        assert render_class(cls) == _lines(
            "interface IFoo extends A, B",
            "{",
            "\tpublic const VERSION = 2;",
            "",
            "\tfunction m(string $value);",
            "}",
            "",
        )

    def test_trait(self) -> None:
        """Render a trait declaration."""
        cls = ClassType("Greets").set_type("trait")
        cls.add_method("hello").set_body("return 'hi';")

        assert render_class(cls) == "trait Greets\n{\n\tpublic function hello()\n\t{\n\t\treturn 'hi';\n\t}\n}\n"


class TestSections:
    """Tests for body grouping and ordering."""

    def test_trait_without_resolutions(self) -> None:
        """Render a trait use as a single line."""
        cls = ClassType("Foo").add_trait("A\\B")
        assert render_class(cls) == "class Foo\n{\n\tuse A\\B;\n}\n"

    def test_trait_with_resolutions(self) -> None:
        """Render trait resolutions as a braced block."""
        cls = ClassType("Foo").add_trait("A\\B", ["  A\\B::foo as bar", "baz as protected"])
        assert render_class(cls) == _lines(
            "class Foo",
            "{",
            "\tuse A\\B {",
            "\t\t  A\\B::foo as bar;",
            "\t\tbaz as protected;",
            "\t}",
            "}",
            "",
        )

    def test_property_default_omission(self) -> None:
        """Omit null defaults but show zero."""
        cls = ClassType("Foo")
        cls.add_property("x")
        cls.add_property("y", 0)
        assert render_class(cls) == "class Foo\n{\n\tpublic $x;\n\n\tpublic $y = 0;\n}\n"

    def test_group_order_ignores_insertion_order(self) -> None:
        """Order groups as constants, properties, methods."""
        cls = ClassType("Foo")
        cls.add_method("b")
        cls.add_method("a")
        cls.add_property("q")
        cls.add_property("p")
        cls.add_constant("Z", 1)
        cls.add_constant("Y", 2)

        code = render_class(cls)
        positions = [code.index(fragment) for fragment in ("Z =", "Y =", "$q", "$p", "b()", "a()")]
        assert positions == sorted(positions)

    def test_constants_then_methods(self) -> None:
        """Separate constants from methods by one blank line."""
        cls = ClassType("Foo")
        cls.add_constant("A", 1)
        cls.add_method("run")
        assert render_class(cls) == "class Foo\n{\n\tconst A = 1;\n\n\tpublic function run()\n\t{\n\t}\n}\n"

    def test_wrapped_constant_value_is_indented(self) -> None:
        """Indent a wrapped constant value with the body."""
        cls = ClassType("Foo")
        cls.add_constant("LIST", list(range(40)))
        items = "".join(f"\t\t{i},\n" for i in range(40))
        assert render_class(cls) == f"class Foo\n{{\n\tconst LIST = [\n{items}\t];\n}}\n"


class TestNameShortening:
    """Tests for shortening names through a namespace."""

    def test_bound_namespace(self) -> None:
        """Shorten names through the namespace the class was created in."""
        ns = Namespace("App\\Model")
        ns.add_use("Nette\\SmartObject")
        ns.add_use("Psr\\Log\\LoggerInterface")
        cls = ClassType("User", ns)
        cls.set_extends("\\App\\Model\\Base").add_implement("\\Countable")
        cls.add_trait("Nette\\SmartObject")
        method = cls.add_method("setLogger")
        method.add_parameter("logger").set_type_hint("Psr\\Log\\LoggerInterface")
        method.set_return_type("self")

        assert render_class(cls) == _lines(
            "class User extends Base implements \\Countable",
            "{",
            "\tuse SmartObject;",
            "",
            "\tpublic function setLogger(LoggerInterface $logger): self",
            "\t{",
            "\t}",
            "}",
            "",
        )

    def test_explicit_shortener_overrides(self) -> None:
        """Shorten names through an explicitly passed shortener."""
        cls = ClassType("User").set_extends(["App\\Base", "Other\\Thing"])
        assert render_class(cls, Namespace("App")) == "class User extends Base, \\Other\\Thing\n{\n}\n"

    def test_names_as_stored_without_shortener(self) -> None:
        """Render names as stored when no shortener is available."""
        cls = ClassType("User").set_extends("\\App\\Base").add_trait("\\App\\T")
        assert render_class(cls) == "class User extends \\App\\Base\n{\n\tuse \\App\\T;\n}\n"


class TestRenderBehaviour:
    """Tests for idempotence and configuration."""

    def test_idempotent(self) -> None:
        """Render identical output on repeated calls."""
        cls = ClassType("Foo").add_trait("T")
        cls.add_property("p", [1, 2])
        cls.add_method("m").set_body("return 1;")
        assert render_class(cls) == render_class(cls)

    def test_does_not_mutate_model(self) -> None:
        """Leave the model unchanged after rendering."""
        cls = ClassType("Foo")
        cls.add_property("p", {"a": [1]})
        render_class(cls)
        assert cls.get_property("p").value == {"a": [1]}

    def test_custom_indentation(self) -> None:
        """Use the configured indentation throughout."""
        cls = ClassType("Foo")
        cls.add_method("run").set_body("return 1;")
        config = PrinterConfig(indentation="    ")
        assert render_class(cls, config=config) == (
            "class Foo\n{\n    public function run()\n    {\n        return 1;\n    }\n}\n"
        )

    def test_doc_comment_single_line_becomes_block(self) -> None:
        """Render a one-line class comment as a block."""
        cls = ClassType("Foo").set_comment("Just one line")
        assert render_class(cls) == "/**\n * Just one line\n */\nclass Foo\n{\n}\n"
