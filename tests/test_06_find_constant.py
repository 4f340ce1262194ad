"""Test share documents, sample selection and constant term reconstruction."""
import io
import json
import logging
import pytest
import polyconst as pc
from polyconst import BigFraction, InputError, InvalidDigit, SingularSystem, Sample

F = BigFraction


def test_load_document(example_path, example_document):
    assert pc.load_document(example_path) == example_document
    assert pc.load_document(example_document) is example_document
    with open(example_path, 'r') as fs:
        assert pc.load_document(fs) == example_document


def test_load_invalid_documents():
    with pytest.raises(InputError):
        pc.load_document(io.StringIO("{not json"))
    with pytest.raises(InputError):
        pc.load_document(io.StringIO("[1, 2]"))


def test_parse_keys(example_document):
    assert pc.parse_keys(example_document) == (4, 3)
    assert pc.parse_keys({"keys": {"n": "5", "k": "+2"}}) == (5, 2)
    for doc in [{"keys": {"n": 1, "k": " 2"}}, {"keys": {"n": 1, "k": "1_0"}}, {"keys": {"n": 1, "k": "\u0663"}},
                {}, {"keys": 3}, {"keys": {"n": 1}}, {"keys": {"n": 1, "k": "two"}}, {"keys": {"n": 1, "k": True}}]:
        with pytest.raises(InputError):
            pc.parse_keys(doc)


def test_parse_shares(example_document):
    assert pc.parse_shares(example_document) == [(1, 10, "4"), (2, 2, "111"), (3, 10, "12"), (6, 4, "213")]
    bad_documents = [
        {"x": {"base": "10", "value": "1"}},
        {"1": "10"},
        {"1": {"value": "1"}},
        {"1": {"base": "10"}},
        {"1": {"base": "ten", "value": "1"}},
        {"1": {"base": "10", "value": 1}},
        {"1_0": {"base": "10", "value": "5"}},
        {" 1": {"base": "10", "value": "5"}},
        {"1": {"base": "1_6", "value": "5"}},
    ]
    for doc in bad_documents:
        with pytest.raises(InputError):
            pc.parse_shares(doc)


def test_decode_samples():
    samples = pc.decode_samples([(1, 16, "ff"), (2, 2, "101")])
    assert samples == [Sample(1, 255, 16, "ff"), Sample(2, 5, 2, "101")]
    with pytest.raises(InvalidDigit):
        pc.decode_samples([(1, 10, "4"), (2, 2, "102")])


def test_select_samples():
    samples = [Sample(5, 1), Sample(-1, 2), Sample(3, 3), Sample(0, 4)]
    selected, unused = pc.select_samples(samples, 2)
    assert [s.x for s in selected] == [-1, 0]
    assert [s.x for s in unused] == [3, 5]
    selected, unused = pc.select_samples(samples, 4)
    assert len(selected) == 4 and unused == []
    for k in [0, -1, 5, 2.0, None]:
        with pytest.raises(InputError):
            pc.select_samples(samples, k)


def test_find_constant_example(example_path):
    result = pc.find_constant(example_path)
    assert result.constant == 3
    assert result.is_integer
    assert result.format() == "c = 3"
    assert str(result) == "c = 3"
    assert [s.x for s in result.samples] == [1, 2, 3]
    assert [s.x for s in result.unused] == [6]
    assert result.polynomial == pc.Polynomial([1, 0, 3])


def test_find_constant_fraction(fractional_document):
    result = pc.find_constant(fractional_document)
    assert result.constant == F(3, 2)
    assert not result.is_integer
    assert result.format() == "c is not an integer: 3/2"


def test_find_constant_zero():
    doc = {"keys": {"n": 2, "k": 2}, "2": {"base": "10", "value": "2"}, "1": {"base": "10", "value": "1"}}
    result = pc.find_constant(doc)
    assert result.format() == "c = 0"


def test_find_constant_uses_lowest_x(example_document):
    # x = 6 has a large value that must not be used with k = 3
    example_document["6"] = {"base": "16", "value": "ffff"}
    assert pc.find_constant(example_document).constant == 3


def test_find_constant_k_override(example_document):
    result = pc.find_constant(example_document, k=4)
    assert result.constant == 3
    assert result.polynomial == pc.Polynomial([0, 1, 0, 3])
    # two points (1,4), (2,7): y = 3x + 1
    assert pc.find_constant(example_document, k=2).constant == 1


def test_find_constant_verify(example_document, caplog):
    result = pc.find_constant(example_document, verify=True)
    assert result.inconsistent == []
    example_document["6"] = {"base": "10", "value": "40"}
    with caplog.at_level(logging.WARNING):
        result = pc.find_constant(example_document, verify=True)
    assert [s.x for s in result.inconsistent] == [6]
    assert result.constant == 3
    assert "does not lie on the reconstructed polynomial" in caplog.text


def test_find_constant_warns_on_n_mismatch(example_document, caplog):
    example_document["keys"]["n"] = 7
    with caplog.at_level(logging.WARNING):
        pc.find_constant(example_document)
    assert "declares n=7" in caplog.text


def test_find_constant_errors(example_document):
    with pytest.raises(InputError):
        pc.find_constant(example_document, k=5)
    with pytest.raises(InputError):
        pc.find_constant(example_document, unknown=1)
    example_document["3"] = {"base": "8", "value": "9"}
    with pytest.raises(InvalidDigit):
        pc.find_constant(example_document)


def test_constant_term_duplicate_x():
    assert pc.constant_term([(1, 10, "3"), (2, 10, "7"), (3, 10, "13")], 3) == 1
    assert pc.constant_term([(1, 10, "3"), (2, 10, "6"), (3, 10, "11")], 3) == 2
    with pytest.raises(SingularSystem):
        pc.constant_term([(5, 10, "10"), (5, 10, "20")], 2)


def test_find_constant_large_shares(write_document):
    # y = 5x^2 + 7x + s with a 300 bit secret s, values given in base 36
    from numpy import base_repr
    secret = 2**300 + 987654321
    doc = {"keys": {"n": 3, "k": 3}}
    for x in [1, 2, 3]:
        doc[str(x)] = {"base": "36", "value": base_repr(5 * x * x + 7 * x + secret, 36).lower()}
    result = pc.find_constant(write_document(doc))
    assert result.constant == secret


def test_load_rejects_invalid_utf8(tmp_path):
    path = tmp_path / "shares.json"
    path.write_bytes(b'{"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": "\xff\xfe"}}')
    with pytest.raises(InputError):
        pc.load_document(str(path))


def test_load_rejects_duplicate_keys():
    text = '{"keys": {"n": 2, "k": 2}, "1": {"base": "10", "value": "4"}, "1": {"base": "10", "value": "5"}}'
    with pytest.raises(InputError) as e:
        pc.load_document(io.StringIO(text))
    assert "'1'" in str(e.value)
    with pytest.raises(InputError):
        pc.load_document(io.StringIO('{"keys": {"n": 1, "n": 2, "k": 1}}'))
