"""Tests for log_lib.emit and log_lib.printers — message composition."""

import io

import pytest

from comptrace.lib.log_lib import (
    ALL, DEBUG, ERROR, FUNCTION, INFO, LEVEL_ALL, PREFIX_FUNC,
    PREFIX_LEVEL, PREFIX_NODE, PREFIX_TIME, WARN, LogComponent,
    PrinterHooks, emit_message, emit_uncond,
)


def _time(file):
    file.write("t=1.5s")


def _node(file):
    file.write("[node 3]")


@pytest.fixture
def comp(registry):
    """Component with every level enabled and no prefixes."""
    c = LogComponent("Comp", registry)
    c.enable(LEVEL_ALL)
    return c


# =============================================================================
# Printer hooks
# =============================================================================

class TestPrinterHooks:
    """get/set of the two printer slots."""

    def test_default_unset(self):
        hooks = PrinterHooks()
        assert hooks.get_time_printer() is None
        assert hooks.get_node_printer() is None

    def test_set_and_get(self):
        hooks = PrinterHooks()
        hooks.set_time_printer(_time)
        hooks.set_node_printer(_node)
        assert hooks.get_time_printer() is _time
        assert hooks.get_node_printer() is _node

    def test_set_none_resets(self):
        hooks = PrinterHooks(time_printer=_time)
        hooks.set_time_printer(None)
        assert hooks.get_time_printer() is None

    def test_reset(self):
        hooks = PrinterHooks(time_printer=_time, node_printer=_node)
        hooks.reset()
        assert hooks.get_time_printer() is None
        assert hooks.get_node_printer() is None

    def test_registry_owns_hooks(self, registry):
        assert isinstance(registry.printers, PrinterHooks)


# =============================================================================
# Message emission
# =============================================================================

class TestEmitMessage:
    """Level gating and prefix composition."""

    def test_disabled_level_writes_nothing(self, registry, buf):
        c = LogComponent("Quiet", registry)
        c.enable(ERROR)
        c.debug("hidden")
        assert buf.getvalue() == ""

    def test_plain_message(self, comp, buf):
        comp.debug("value={v}", v=42)
        assert buf.getvalue() == "value=42\n"

    def test_braces_left_alone_without_kwargs(self, comp, buf):
        comp.info("literal {braces}")
        assert buf.getvalue() == "literal {braces}\n"

    @pytest.mark.parametrize("method,label", [
        ("error", "error"), ("warn", "warn"), ("debug", "debug"),
        ("info", "info"), ("logic", "logic"),
    ])
    def test_level_prefix(self, comp, buf, method, label):
        comp.enable(PREFIX_LEVEL)
        getattr(comp, method)("msg")
        assert buf.getvalue() == f"[{label}] msg\n"

    def test_func_prefix_uses_caller_name(self, comp, buf):
        comp.enable(PREFIX_FUNC)
        comp.warn("hi")
        assert buf.getvalue() == "Comp:test_func_prefix_uses_caller_name(): hi\n"

    def test_log_method_uses_caller_name(self, comp, buf):
        comp.enable(PREFIX_FUNC)
        comp.log(INFO, "hi")
        assert buf.getvalue() == "Comp:test_log_method_uses_caller_name(): hi\n"

    def test_explicit_func_name(self, comp, buf):
        comp.enable(PREFIX_FUNC)
        emit_message(comp, INFO, "hi", func_name="route")
        assert buf.getvalue() == "Comp:route(): hi\n"

    def test_direct_call_uses_caller_name(self, comp, buf):
        comp.enable(PREFIX_FUNC)
        emit_message(comp, INFO, "hi")
        assert buf.getvalue() == "Comp:test_direct_call_uses_caller_name(): hi\n"

    def test_time_prefix_with_printer(self, comp, registry, buf):
        registry.printers.set_time_printer(_time)
        comp.enable(PREFIX_TIME)
        comp.info("tick")
        assert buf.getvalue() == "t=1.5s tick\n"

    def test_time_prefix_without_printer(self, comp, buf):
        comp.enable(PREFIX_TIME)
        comp.info("tick")
        assert buf.getvalue() == "tick\n"

    def test_printer_ignored_when_prefix_disabled(self, comp, registry, buf):
        registry.printers.set_node_printer(_node)
        comp.info("tick")
        assert buf.getvalue() == "tick\n"

    def test_prefix_order(self, registry, buf):
        registry.printers.set_time_printer(_time)
        registry.printers.set_node_printer(_node)
        c = LogComponent("Net", registry)
        c.enable(ALL)
        emit_message(c, WARN, "late packet", func_name="recv")
        assert buf.getvalue() == (
            "t=1.5s [node 3] Net:recv(): [warn] late packet\n")

    def test_file_override(self, comp, buf):
        other = io.StringIO()
        comp.log(DEBUG, "elsewhere", file=other)
        assert other.getvalue() == "elsewhere\n"
        assert buf.getvalue() == ""

    def test_defaults_to_stderr(self, make_registry, capsys):
        reg = make_registry("Comp=error", file=None)
        c = LogComponent("Comp", reg)
        c.error("to stderr")
        captured = capsys.readouterr()
        assert captured.err == "to stderr\n"
        assert captured.out == ""


# =============================================================================
# Function records
# =============================================================================

class TestFunctionRecord:
    """LogComponent.function() writes Name:func(params)."""

    def test_function_record(self, comp, buf):
        comp.function(1, "a")
        assert buf.getvalue() == "Comp:test_function_record(1, a)\n"

    def test_no_params(self, comp, buf):
        comp.function()
        assert buf.getvalue() == "Comp:test_no_params()\n"

    def test_needs_function_level(self, registry, buf):
        c = LogComponent("C", registry)
        c.enable(LEVEL_ALL & ~FUNCTION)
        c.function(1)
        assert buf.getvalue() == ""

    def test_level_and_func_prefix_not_repeated(self, comp, buf):
        comp.enable(PREFIX_FUNC | PREFIX_LEVEL)
        comp.function()
        assert buf.getvalue() == (
            "Comp:test_level_and_func_prefix_not_repeated()\n")

    def test_time_prefix_applies(self, comp, registry, buf):
        registry.printers.set_time_printer(_time)
        comp.enable(PREFIX_TIME)
        comp.function("x")
        assert buf.getvalue() == "t=1.5s Comp:test_time_prefix_applies(x)\n"


class TestEmitUncond:
    """emit_uncond() ignores configuration."""

    def test_writes_to_file(self):
        out = io.StringIO()
        emit_uncond("always", file=out)
        assert out.getvalue() == "always\n"

    def test_defaults_to_stderr(self, capsys):
        emit_uncond("always")
        assert capsys.readouterr().err == "always\n"
