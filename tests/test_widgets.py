import pytest

from patternkit.widgets import (
    OSX_STYLE,
    WIN_STYLE,
    BaseDialog,
    Button,
    OSXButton,
    OSXDialog,
    OSXEdit,
    OSXFactory,
    StyledDialog,
    WidgetFactory,
    WinButton,
    WinDialog,
    WinEdit,
    WinFactory,
    factory_for_option,
    main,
)


def test_win_controls_draw(capsys):
    WinButton().draw()
    WinEdit().draw()
    assert capsys.readouterr().out == "Draw WinButton\nDraw WinEdit\n"


def test_osx_edit_draws_same_text_as_button(capsys):
    OSXButton().draw()
    OSXEdit().draw()
    assert capsys.readouterr().out == "Draw OSXButton\nDraw OSXButton\n"


def test_factories_produce_matching_families(capsys):
    win = WinFactory()
    osx = OSXFactory()
    win.create_button().draw()
    win.create_edit().draw()
    osx.create_button().draw()
    osx.create_edit().draw()
    assert capsys.readouterr().out == (
        "Draw WinButton\nDraw WinEdit\nDraw OSXButton\nDraw OSXButton\n"
    )


def test_factory_creates_new_objects_each_time(capsys):
    factory = WinFactory()
    first = factory.create_button()
    second = factory.create_button()
    first.draw()
    second.draw()
    factory.create_edit().draw()
    assert len({id(first), id(second)}) == 2
    assert capsys.readouterr().out == "Draw WinButton\nDraw WinButton\nDraw WinEdit\n"


@pytest.mark.parametrize(
    "option, expected",
    [("-style:OSX", OSXFactory), ("-style:Win", WinFactory), ("", WinFactory)],
)
def test_factory_for_option(option, expected):
    assert type(factory_for_option(option)) is expected


def test_abstract_bases_cannot_be_instantiated():
    with pytest.raises(TypeError):
        WidgetFactory()
    with pytest.raises(TypeError):
        BaseDialog()
    with pytest.raises(TypeError):
        Button()


def test_win_dialog_init(capsys):
    WinDialog().init()
    assert capsys.readouterr().out == "Draw WinButton\nDraw WinEdit\n"


def test_osx_dialog_factory_methods(capsys):
    dialog = OSXDialog()
    dialog.create_button().draw()
    dialog.create_edit().draw()
    assert capsys.readouterr().out == "Draw OSXButton\nDraw OSXButton\n"


def test_styled_dialogs(capsys):
    StyledDialog(OSX_STYLE).init()
    StyledDialog(WIN_STYLE).init()
    out = capsys.readouterr().out
    assert out == "Draw OSXButton\nDraw OSXButton\nDraw WinButton\nDraw WinEdit\n"


def test_main_osx(capsys):
    assert main(["-style:OSX"]) == 0
    assert capsys.readouterr().out == "Draw OSXButton\n"


def test_main_defaults_to_win(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Draw WinButton\n"