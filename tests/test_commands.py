import io

import pytest

from mdeditor.models.errors import MacroCommandError
from mdeditor.services.commands import CallableCommand, MacroCommand, RenderCommand
from mdeditor.services.element_factory import MarkdownBuilder
from mdeditor.services.render_strategy import ConsoleRenderStrategy


class FakeStrategy:
    def __init__(self):
        self.calls = []

    def render(self, elements):  # noqa: ANN001
        self.calls.append(list(elements))


def _recording_commands(log):
    def ok(name):
        return CallableCommand(lambda: log.append(name), name)

    def boom():
        log.append("B")
        raise RuntimeError("B failed")

    return [ok("A"), CallableCommand(boom, "B"), ok("C")]


def test_render_command_defers_until_execute():
    elements = MarkdownBuilder().add_bold().build()
    strategy = FakeStrategy()
    cmd = RenderCommand(strategy, elements)
    assert strategy.calls == []

    cmd.execute()
    assert strategy.calls == [list(elements)]


def test_render_command_writes_through_strategy():
    buf = io.StringIO()
    elements = MarkdownBuilder().add_italic().add_bold().build()
    RenderCommand(ConsoleRenderStrategy(buf), elements).execute()
    assert buf.getvalue() == "*Italic Text*\n**Bold Text**\n"


def test_macro_runs_in_insertion_order():
    log = []
    macro = MacroCommand()
    macro.add(CallableCommand(lambda: log.append(1))).add(
        CallableCommand(lambda: log.append(2))
    )
    macro.execute()
    assert log == [1, 2]
    assert len(macro.commands) == 2


def test_macro_continue_on_error_reports_failure_after_all():
    log = []
    macro = MacroCommand(_recording_commands(log))

    with pytest.raises(MacroCommandError) as info:
        macro.execute()

    assert log == ["A", "B", "C"]
    assert len(info.value.failures) == 1
    index, command, exc = info.value.failures[0]
    assert index == 1
    assert command.name == "B"
    assert isinstance(exc, RuntimeError)


def test_macro_fail_fast_stops_at_first_failure():
    log = []
    macro = MacroCommand(_recording_commands(log), fail_fast=True)

    with pytest.raises(RuntimeError, match="B failed"):
        macro.execute()

    assert log == ["A", "B"]


def test_nested_macro_commands():
    log = []
    inner = MacroCommand([CallableCommand(lambda: log.append("inner"))])
    outer = MacroCommand([CallableCommand(lambda: log.append("outer")), inner])
    outer.execute()
    assert log == ["outer", "inner"]
