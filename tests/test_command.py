import io

import pytest

from patternkit.command import (
    CLEAR_SCREEN,
    AddCommand,
    Circle,
    Command,
    DrawCommand,
    Editor,
    Macro,
    Rect,
    main,
)


def test_add_command_execute_and_undo():
    shapes = []
    cmd = AddCommand(shapes, Rect)
    cmd.execute()
    assert [type(s) for s in shapes] == [Rect]
    assert cmd.can_undo() is True
    cmd.undo()
    assert shapes == []


def test_draw_command_draws_in_order(capsys):
    shapes = [Rect(), Circle()]
    DrawCommand(shapes).execute()
    assert capsys.readouterr().out == "draw rect\ndraw circle\n"


def test_draw_command_undo_clears_screen(capsys):
    cmd = DrawCommand([])
    assert cmd.can_undo() is True
    cmd.undo()
    assert capsys.readouterr().out == CLEAR_SCREEN


def test_macro_runs_nested_commands():
    shapes = []
    m1 = Macro()
    m1.add(AddCommand(shapes, Rect))
    m1.add(AddCommand(shapes, Circle))
    m2 = Macro()
    m2.add(AddCommand(shapes, Circle))
    m2.add(m1)
    m2.execute()
    assert [type(s) for s in shapes] == [Circle, Rect, Circle]
    assert m2.can_undo() is False


def test_command_is_abstract():
    with pytest.raises(TypeError):
        Command()


def test_editor_adds_and_undoes():
    editor = Editor()
    editor.handle(1)
    editor.handle(2)
    assert [type(s) for s in editor.shapes] == [Rect, Circle]
    editor.handle(0)
    assert [type(s) for s in editor.shapes] == [Rect]
    assert len(editor.undo_stack) == 1


def test_editor_undo_on_empty_history():
    editor = Editor()
    assert editor.handle(0) is None
    assert editor.shapes == []


def test_editor_ignores_unknown_code():
    editor = Editor()
    assert editor.handle(5) is None
    assert editor.undo_stack == []


def test_undo_of_draw_keeps_shapes(capsys):
    editor = Editor()
    editor.handle(1)
    editor.handle(9)
    editor.handle(0)
    assert [type(s) for s in editor.shapes] == [Rect]
    assert capsys.readouterr().out.endswith(CLEAR_SCREEN)


def test_main_reads_codes(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2\n9\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "draw rect\ndraw circle\n"