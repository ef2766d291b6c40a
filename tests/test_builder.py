import pytest

from patternkit.builder import American, CharacterBuilder, Director, Korean, main


def test_korean_parts():
    builder = Korean()
    assert builder.make_hat() == "갓\n"
    assert builder.make_uniform() == "한복\n"
    assert builder.make_shoes() == "짚신\n"


def test_director_with_korean_builder():
    director = Director()
    director.set_builder(Korean())
    assert director.construct() == "갓\n한복\n짚신\n"


def test_director_with_american_builder():
    director = Director(American())
    assert director.construct() == "야구모자\n양복\n구두\n"


def test_director_without_builder_uses_fixed_parts():
    assert Director().construct() == "야구모자파란색티셔츠운동화"


def test_switching_builder_changes_result():
    director = Director(Korean())
    first = director.construct()
    director.set_builder(American())
    assert director.construct() != first
    assert director.construct().startswith("야구모자")


def test_construct_follows_part_order():
    class Custom(CharacterBuilder):
        def make_hat(self):
            return "H"

        def make_uniform(self):
            return "U"

        def make_shoes(self):
            return "S"

    assert Director(Custom()).construct() == "HUS"


def test_builder_is_abstract():
    with pytest.raises(TypeError):
        CharacterBuilder()


def test_main_prints_korean_by_default(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "갓\n한복\n짚신\n\n"


def test_main_rejects_unknown_nationality():
    with pytest.raises(SystemExit):
        main(["martian"])