import pytest
from pydantic import ValidationError

from sroc import parse, read_array, read_bool, read_number, read_string
from sroc.document import Document
from sroc.errors import KeyNotFound, SectionNotFound, TypeMismatch
from sroc.nodes import ArrayValue, BooleanValue, IntegerValue, Item, Section, TextValue, ValueType


def test_accessors_round_trip_every_item(sample_document):
    assert sample_document.read_string(None, "name") == "sroc"
    assert sample_document.read_bool(None, "verbose") is False
    assert sample_document.read_number(None, "retries") == 3
    assert sample_document.read_string("server", "host") == "localhost"
    assert sample_document.read_number("server", "port") == 8080
    offsets = sample_document.read_array("server", "offsets", ValueType.INTEGER)
    assert [value.value for value in offsets] == [-1, 0, 1]
    assert sample_document.read_string("server", "banner") == "Welcome\nto the server"
    tags = sample_document.read_array("client", "tags", ValueType.TEXT)
    assert [value.value for value in tags] == ["alpha", "beta"]
    assert sample_document.read_array("client", "empty", ValueType.BOOLEAN) == ()
    assert sample_document.read_bool("client", "enabled") is True


def test_module_level_accessors(sample_document):
    assert read_bool(sample_document, "client", "enabled") is True
    assert read_number(sample_document, "server", "port") == 8080
    assert read_string(sample_document, None, "name") == "sroc"
    assert len(read_array(sample_document, "client", "tags", ValueType.TEXT)) == 2


def test_get_section(sample_document):
    section = sample_document.get_section("server")
    assert isinstance(section, Section)
    assert section.keys() == ["host", "port", "offsets", "banner"]
    assert sample_document.has_section("client")
    assert not sample_document.has_section("Client")


def test_missing_section(sample_document):
    with pytest.raises(SectionNotFound) as excinfo:
        sample_document.get_section("database")
    assert excinfo.value.name == "database"
    with pytest.raises(SectionNotFound):
        sample_document.read_number("database", "port")


def test_missing_key(sample_document):
    with pytest.raises(KeyNotFound) as excinfo:
        sample_document.read_number("server", "timeout")
    assert excinfo.value.key == "timeout"
    assert excinfo.value.section == "server"
    with pytest.raises(KeyNotFound, match="not found in root"):
        sample_document.read_number(None, "port")


def test_type_mismatch():
    document = parse("flag = true")
    with pytest.raises(TypeMismatch) as excinfo:
        document.read_number(None, "flag")
    assert excinfo.value.expected is ValueType.INTEGER
    assert excinfo.value.actual is ValueType.BOOLEAN


@pytest.mark.parametrize(
    "accessor",
    [
        lambda document: document.read_bool(None, "items"),
        lambda document: document.read_string(None, "items"),
        lambda document: document.read_number(None, "items"),
    ],
)
def test_scalar_accessors_reject_arrays(accessor):
    document = parse("items = [1]")
    with pytest.raises(TypeMismatch) as excinfo:
        accessor(document)
    assert excinfo.value.actual is ValueType.ARRAY


def test_array_element_type_mismatch():
    document = parse("ports = [80, 443]")
    with pytest.raises(TypeMismatch) as excinfo:
        document.read_array(None, "ports", ValueType.TEXT)
    assert excinfo.value.expected is ValueType.TEXT
    assert excinfo.value.actual is ValueType.INTEGER


def test_array_accessor_rejects_scalars():
    document = parse('name = "x"')
    with pytest.raises(TypeMismatch) as excinfo:
        document.read_array(None, "name", ValueType.TEXT)
    assert excinfo.value.expected is ValueType.ARRAY


@pytest.mark.parametrize("element_type", list(ValueType))
def test_empty_array_satisfies_any_element_type(element_type):
    document = parse("nothing = []")
    assert document.read_array(None, "nothing", element_type) == ()


def test_failed_access_leaves_document_unchanged(sample_document):
    before = sample_document.model_copy(deep=True)
    for call in (
        lambda: sample_document.get_section("missing"),
        lambda: sample_document.read_bool(None, "name"),
        lambda: sample_document.read_string("server", "nope"),
    ):
        with pytest.raises(Exception):
            call()
    assert sample_document == before


def test_documents_are_frozen(sample_document):
    with pytest.raises(ValidationError):
        sample_document.items = ()
    with pytest.raises(ValidationError):
        sample_document.get_section("server").name = "other"


def test_to_dict(sample_document):
    assert sample_document.to_dict() == {
        "root": {"name": "sroc", "verbose": False, "retries": 3},
        "sections": {
            "server": {
                "host": "localhost",
                "port": 8080,
                "offsets": [-1, 0, 1],
                "banner": "Welcome\nto the server",
            },
            "client": {"tags": ["alpha", "beta"], "empty": [], "enabled": True},
        },
    }


def test_models_reject_mixed_arrays():
    with pytest.raises(ValidationError):
        ArrayValue(values=(IntegerValue(value=1), TextValue(value="a")))


def test_models_reject_out_of_range_integers():
    with pytest.raises(ValidationError):
        IntegerValue(value=2**63)


def test_models_do_not_coerce_types():
    with pytest.raises(ValidationError):
        BooleanValue(value=1)
    with pytest.raises(ValidationError):
        IntegerValue(value=True)


@pytest.mark.parametrize("key", ["", "two words", "dash-ed", "ünïcode", "x\n", "x\n\n"])
def test_models_reject_invalid_keys(key):
    with pytest.raises(ValidationError):
        Item(key=key, value=BooleanValue(value=True))


def test_models_reject_duplicate_keys_and_sections():
    item = Item(key="x", value=IntegerValue(value=1))
    with pytest.raises(ValidationError):
        Section(name="S", items=(item, item))
    with pytest.raises(ValidationError):
        Document(sections=(Section(name="S"), Section(name="S")))


def test_duplicate_section_error_names_the_section():
    sections = tuple(Section(name=f"s{index}") for index in range(3)) + (Section(name="s1"),)
    with pytest.raises(ValidationError, match="Duplicate section 's1'"):
        Document(sections=sections)


def test_many_sections():
    text = "".join(f"[s{index}]\nvalue = {index}\n" for index in range(5000))
    document = parse(text)
    assert len(document.sections) == 5000
    assert document.read_number("s4999", "value") == 4999
