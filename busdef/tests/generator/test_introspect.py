"""Tests for introspection rendering and reading."""

import pytest

from busdef.defs import (
    Access,
    Annotation,
    ArgDef,
    Direction,
    InterfaceDef,
    MethodDef,
    PropertyDef,
    SignalDef,
)
from busdef.generator import ValidationError, parse, read, render, render_interface

IFACE = "org.alljoyn.test.InterfaceDescription"


def _ping_chirp():
    iface = InterfaceDef(IFACE)
    ping = MethodDef("ping", "s", IFACE, "s")
    ping.set_arg_list([ArgDef("in", "s", Direction.IN), ArgDef("out", "s", Direction.OUT)])
    iface.add_method(ping)
    chirp = SignalDef("chirp", "s", IFACE)
    chirp.add_arg(ArgDef("chirp", "s"))
    iface.add_signal(chirp)
    return iface


def describe_render_interface():
    def orders_members_by_name(expect):
        expect(render_interface(_ping_chirp())) == (
            '<interface name="org.alljoyn.test.InterfaceDescription">\n'
            '  <signal name="chirp">\n'
            '    <arg name="chirp" type="s" direction="out"/>\n'
            "  </signal>\n"
            '  <method name="ping">\n'
            '    <arg name="in" type="s" direction="in"/>\n'
            '    <arg name="out" type="s" direction="out"/>\n'
            "  </method>\n"
            "</interface>\n"
        )

    def renders_properties(expect):
        iface = InterfaceDef(IFACE)
        iface.add_property(PropertyDef("prop3", "u", IFACE, Access.READWRITE))
        iface.add_property(PropertyDef("prop1", "s", IFACE, Access.READ))
        iface.add_property(PropertyDef("prop2", "i", IFACE, Access.WRITE))
        expect(render_interface(iface)) == (
            '<interface name="org.alljoyn.test.InterfaceDescription">\n'
            '  <property name="prop1" type="s" access="read"/>\n'
            '  <property name="prop2" type="i" access="write"/>\n'
            '  <property name="prop3" type="u" access="readwrite"/>\n'
            "</interface>\n"
        )

    def renders_annotations_at_every_level(expect):
        iface = InterfaceDef(IFACE)
        doc = "org.alljoyn.Bus.DocString.En"
        ping = MethodDef("ping", "s", IFACE, "s", annotations={doc: "me_desc"})
        ping.set_arg_list(
            [
                ArgDef("in", "s", Direction.IN, annotations={doc: "ar_desc"}),
                ArgDef("out", "s", Direction.OUT),
            ]
        )
        iface.add_method(ping)
        chirp = SignalDef("chirp", "s", IFACE)
        chirp.add_arg(ArgDef("chirp", "s"))
        chirp.set_annotation("org.alljoyn.Bus.DocString.En", "En:si_desc")
        chirp.set_annotation("org.alljoyn.Bus.DocString.De", "De:si_desc")
        iface.add_signal(chirp)
        prop = PropertyDef("prop1", "s", IFACE)
        prop.set_annotation("org.alljoyn.Bus.DocString.En", "pr_desc")
        iface.add_property(prop)
        iface.set_annotation("org.alljoyn.Bus.DocString.En", "in_desc")

        expect(render_interface(iface)) == (
            '<interface name="org.alljoyn.test.InterfaceDescription">\n'
            '  <signal name="chirp">\n'
            '    <arg name="chirp" type="s" direction="out"/>\n'
            '    <annotation name="org.alljoyn.Bus.DocString.De" value="De:si_desc"/>\n'
            '    <annotation name="org.alljoyn.Bus.DocString.En" value="En:si_desc"/>\n'
            "  </signal>\n"
            '  <method name="ping">\n'
            '    <arg name="in" type="s" direction="in">\n'
            '      <annotation name="org.alljoyn.Bus.DocString.En" value="ar_desc"/>\n'
            "    </arg>\n"
            '    <arg name="out" type="s" direction="out"/>\n'
            '    <annotation name="org.alljoyn.Bus.DocString.En" value="me_desc"/>\n'
            "  </method>\n"
            '  <property name="prop1" type="s" access="read">\n'
            '    <annotation name="org.alljoyn.Bus.DocString.En" value="pr_desc"/>\n'
            "  </property>\n"
            '  <annotation name="org.alljoyn.Bus.DocString.En" value="in_desc"/>\n'
            "</interface>\n"
        )

    def self_closes_empty_members(expect):
        iface = InterfaceDef(IFACE)
        iface.add_signal(SignalDef("tick", "", IFACE))
        expect('  <signal name="tick"/>\n' in render_interface(iface)) == True

    def escapes_attribute_values(expect):
        iface = InterfaceDef(IFACE, annotations={"org.example.Vendor": 'a<b & "c"'})
        text = render_interface(iface)
        expect("a&lt;b &amp; " in text) == True
        expect('"c"' in text) == False

    def renders_frozen_definitions(expect):
        iface = _ping_chirp()
        iface.freeze()
        expect(render_interface(iface).startswith("<interface")) == True


def describe_render():
    def wraps_interfaces_in_node(expect):
        text = render([_ping_chirp()], path="/org/example")
        expect(text.splitlines()[0]) == '<node name="/org/example">'
        expect(text.splitlines()[1]) == '  <interface name="org.alljoyn.test.InterfaceDescription">'
        expect(text.splitlines()[2]) == '    <signal name="chirp">'
        expect(text.endswith("</node>\n")) == True

    def omits_name_without_path(expect):
        expect(render([]).splitlines()[0]) == "<node>"


def describe_read():
    def reads_rendered_interface(expect):
        original = _ping_chirp()
        (iface,) = read(render([original]))

        expect(iface) == original
        expect(iface.get_signal("chirp")) == original.get_signal("chirp")
        expect(iface.get_method("ping")) == original.get_method("ping")
        expect(iface.get_signal("chirp").get_arg("chirp").direction) == None
        expect(iface.get_method("ping").get_arg("out").direction) == Direction.OUT

    def reads_bare_interface_with_annotations(expect):
        (iface,) = read(
            """
            <interface name="com.example.Iface">
              <signal name="Notify">
                <arg name="message" type="s" direction="out"/>
                <annotation name="org.freedesktop.DBus.Deprecated" value="true"/>
              </signal>
              <property name="Volume" type="i" access="readwrite"/>
              <annotation name="org.alljoyn.Bus.Secure" value="true"/>
            </interface>
            """
        )
        signal = iface.get_signal("Notify")
        expect(signal.signature) == "s"
        expect(signal.is_deprecated) == True
        expect(iface.get_property("Volume").access) == Access.READWRITE
        expect(iface.is_secure) == True

    def method_args_default_to_input(expect):
        (iface,) = read(
            '<interface name="com.example.Iface">'
            '<method name="Ping"><arg name="text" type="s"/>'
            '<arg name="reply" type="s" direction="out"/></method>'
            "</interface>"
        )
        method = iface.get_method("Ping")
        expect(method.signature) == "s"
        expect(method.reply_signature) == "s"

    def ignores_child_nodes(expect):
        interfaces = read(
            '<node><interface name="com.example.A"/><node name="child"/></node>'
        )
        expect([i.name for i in interfaces]) == ["com.example.A"]

    def round_trips_definition_file(expect):
        interfaces = parse(
            """
            @secure
            interface com.example.Iface {
                @deprecated
                signal Notify(@doc("text") message: s)
                method Ping(text: s) -> (reply: s)
                property Volume: i readwrite
            }
        """
        )
        (iface,) = read(render(interfaces))
        expect(iface.get_signal("Notify").is_deprecated) == True
        arg = iface.get_signal("Notify").get_arg("message")
        expect(arg.get_annotation(Annotation.DOC_STRING)) == "text"
        expect(iface.get_method("Ping")) == interfaces[0].get_method("Ping")
        expect(iface.is_secure) == True

    def rejects_malformed_xml(expect):
        with pytest.raises(ValidationError):
            read("<interface name='x'>")

    def rejects_unknown_root(expect):
        with pytest.raises(ValidationError):
            read("<object/>")

    def rejects_interface_without_name(expect):
        with pytest.raises(ValidationError):
            read("<interface/>")

    def rejects_unknown_direction(expect):
        with pytest.raises(ValidationError) as exc:
            read(
                '<interface name="com.example.A"><method name="M">'
                '<arg name="p" type="s" direction="inout"/></method></interface>'
            )
        expect("inout" in str(exc.value)) == True

    def rejects_unknown_access(expect):
        with pytest.raises(ValidationError) as exc:
            read(
                '<interface name="com.example.A">'
                '<property name="P" type="s" access="readonly"/></interface>'
            )
        expect("readonly" in str(exc.value)) == True
