"""Tests for the unit definition parser."""

import io

import pytest

from unitdef import (
    Attributes,
    FullQualifiedName,
    NoUnitFoundError,
    ParseError,
    QuotedValue,
    TokenValue,
    TupleValue,
    UnitDefError,
    UnitSyntaxError,
    ValueSyntaxError,
    parse,
    parse_file,
    parse_unit,
)


class TestParseUnit:
    def test_attributes_and_fqn(self, jobnet):
        root = parse_unit(jobnet)
        assert root.attributes == Attributes(name="ROOT", jp1_user_name="jp1admin")
        assert root.fqn == FullQualifiedName.of("ROOT")

    def test_parameters_in_order(self, jobnet):
        root = parse_unit(jobnet)
        names = [p.name for p in root.parameters]
        assert names == ["ty", "sd", "st", "el", "el", "ar", "cm"]

    def test_multiple_values(self, jobnet):
        root = parse_unit(jobnet)
        sd = root.parameter("sd")
        assert sd.values == (TokenValue(raw="1"), TokenValue(raw="10/05"))

    def test_quoted_value(self, jobnet):
        root = parse_unit(jobnet)
        assert root.parameter("cm").first == QuotedValue(content='root "jobnet" comment')

    def test_lone_escape_character_survives(self):
        unit = parse_unit('unit=A;{cm="a#b";x=p"a#b"q;}')
        assert unit.parameter("cm").first == QuotedValue(content="a#b")
        assert unit.parameter("x").first == TokenValue(raw='p"a#b"q')

    def test_tuple_with_trailing_separator(self):
        unit = parse_unit("unit=A;{t=(a,);}")
        assert len(unit.parameter("t").first) == 1

    def test_sub_units_and_fqns(self, jobnet):
        root = parse_unit(jobnet)
        assert [u.name for u in root.sub_units] == ["JOB1", "NET1"]
        job2 = root.sub_unit("NET1").sub_unit("JOB2")
        assert str(job2.fqn) == "/ROOT/NET1/JOB2"
        assert job2.fqn == root.sub_unit("NET1").fqn.child("JOB2")

    def test_unit_type_code(self, jobnet):
        root = parse_unit(jobnet)
        assert root.unit_type_code == "n"
        assert root.sub_unit("JOB1").unit_type_code == "j"

    def test_space_form_of_header(self):
        unit = parse_unit("unit A,,,;{ty=g;}")
        assert unit.attributes == Attributes(
            name="A", permission_mode="", jp1_user_name="", resource_group_name=""
        )

    def test_missing_trailing_attributes_are_empty(self):
        unit = parse_unit("unit=A;{ty=g;}")
        assert unit.attributes.fields() == ("A", "", "", "")

    def test_all_four_attributes(self):
        unit = parse_unit("unit=A,AA,user1,grp;{ty=g;}")
        assert unit.attributes.fields() == ("A", "AA", "user1", "grp")
        assert unit.attributes.permission.specified

    def test_repeated_parameters_keep_order(self):
        unit = parse_unit("unit=N,,,;{ty=n;ar=(f=A,t=B);ar=(f=B,t=C);}")
        ars = unit.parameters_named("ar")
        assert len(ars) == 2
        assert ars[0].values == (TupleValue.of(("f", "A"), ("t", "B")),)
        assert ars[1].values == (TupleValue.of(("f", "B"), ("t", "C")),)

    def test_empty_parameter_value(self):
        unit = parse_unit("unit=A,,,;{ty=j;prm=;}")
        assert unit.parameter("prm").values == (TokenValue(raw=""),)

    def test_body_may_start_with_sub_units(self):
        unit = parse_unit("unit=A,,,;{unit=B,,,;{ty=j;}}")
        assert unit.parameters == ()
        assert unit.sub_unit("B") is not None

    def test_parameter_named_like_keyword(self):
        unit = parse_unit("unit=A,,,;{ty=j;unitx=1;}")
        assert unit.parameter("unitx").first == TokenValue(raw="1")

    def test_parse_from_stream(self, jobnet):
        units = parse(io.StringIO(jobnet))
        assert units[0].name == "ROOT"


class TestParseMany:
    def test_multiple_top_level_units(self):
        units = parse("unit=A,,,;{ty=g;}\n\nunit=B,,,;{ty=g;}\n")
        assert [u.name for u in units] == ["A", "B"]
        assert units[1].fqn == FullQualifiedName.of("B")

    def test_empty_input(self):
        with pytest.raises(NoUnitFoundError):
            parse("   \n ")

    def test_parse_unit_rejects_a_second_unit(self):
        with pytest.raises(UnitSyntaxError) as exc:
            parse_unit("unit=A,,,;{ty=g;}\nunit=B,,,;{ty=g;}")
        assert exc.value.line == 2
        assert exc.value.column == 1

    def test_parse_unit_errors_stay_in_hierarchy(self):
        with pytest.raises(UnitDefError):
            parse_unit("unit=A,,,;{ty=g;}unit=B,,,;{ty=g;}")
        with pytest.raises(NoUnitFoundError):
            parse_unit("  ")

    def test_parse_file(self, tmp_path, jobnet):
        path = tmp_path / "jobnet.txt"
        path.write_text(jobnet, encoding="cp932")
        units = parse_file(path, encoding="cp932")
        assert units[0].name == "ROOT"


class TestSyntaxErrors:
    def test_empty_body(self):
        with pytest.raises(UnitSyntaxError):
            parse("unit A;{}")

    def test_parameter_after_sub_unit(self):
        with pytest.raises(UnitSyntaxError):
            parse("unit=A,,,;{ty=n;unit=B,,,;{ty=j;}ty=n;}")

    def test_missing_keyword(self):
        with pytest.raises(UnitSyntaxError):
            parse("unti=A,,,;{ty=g;}")

    def test_missing_open_brace(self):
        with pytest.raises(UnitSyntaxError):
            parse("unit=A,,,;ty=g;}")

    def test_missing_close_brace(self):
        with pytest.raises(UnitSyntaxError):
            parse("unit=A,,,;{ty=g;")

    def test_too_many_attributes(self):
        with pytest.raises(UnitSyntaxError):
            parse("unit=A,,,,;{ty=g;}")

    def test_empty_unit_name(self):
        with pytest.raises(UnitSyntaxError):
            parse("unit=,,,;{ty=g;}")

    def test_empty_parameter_name(self):
        with pytest.raises(UnitSyntaxError):
            parse("unit=A,,,;{=g;}")

    def test_unterminated_quote_is_value_error(self):
        with pytest.raises(ValueSyntaxError):
            parse('unit=A,,,;{cm="abc;}')

    def test_unterminated_tuple(self):
        with pytest.raises(ValueSyntaxError):
            parse("unit=A,,,;{ar=(f=A,t=B;}")

    def test_error_carries_position(self):
        with pytest.raises(ParseError) as exc:
            parse("unit=A,,,;\n{\n\tty=g;\n\tunit=B,,,;{ty=j;}\n\tx=1;\n}")
        assert exc.value.line == 5
        assert exc.value.column == 2
        assert str(exc.value).startswith("line 5, col 2:")
