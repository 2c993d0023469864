"""Introspection descriptor generator."""

from jinja2 import Environment, PackageLoader

from busdef.defs import ArgDef, Direction, InterfaceDef, MemberDef, SignalDef

env = Environment(
    loader=PackageLoader("busdef.generator", "templates"),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    line_comment_prefix="%%",
    line_statement_prefix="%",
)

interface_template = env.get_template("interface.xml.j2")
node_template = env.get_template("node.xml.j2")


def _member_tag(member: MemberDef) -> str:
    return "signal" if isinstance(member, SignalDef) else "method"


def _arg_direction(member: MemberDef, arg: ArgDef) -> str:
    """Signal arguments are always outputs; method arguments default to inputs."""
    if isinstance(member, SignalDef):
        return str(Direction.OUT)
    return str(arg.direction or Direction.IN)


def _helpers() -> dict[str, object]:
    return {"member_tag": _member_tag, "arg_direction": _arg_direction}


def render_interface(interface: InterfaceDef) -> str:
    """Render the introspection descriptor of one interface."""
    return interface_template.render(iface=interface, **_helpers())


def render(interfaces: list[InterfaceDef], path: str | None = None) -> str:
    """Render a node holding the given interfaces."""
    ordered = sorted(interfaces, key=lambda i: i.name)
    return node_template.render(interfaces=ordered, path=path, **_helpers())
