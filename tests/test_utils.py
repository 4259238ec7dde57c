import pytest

from utils import khop_kich_thuoc, la_kich_thuoc_hop_le, tra_cuu


@pytest.mark.parametrize("text, ky_vong", [
    ("3cm", ("3", "cm", 3)),
    (" 3 cm ", ("3", "cm", 6)),
    ("-2.5pt", ("-2.5", "pt", 6)),
    ("+.5em", ("+.5", "em", 5)),
    ("1,5cm", ("1.5", "cm", 5)),
    ("3.in", ("3.", "in", 4)),
    ("12sp", ("12", "sp", 4)),
])
def test_khop_kich_thuoc(text, ky_vong):
    assert khop_kich_thuoc(text) == ky_vong


@pytest.mark.parametrize("text, gia_tri", [
    ("18mu", "1"),
    ("9mu", "0.5"),
    ("1mu", "0.056"),
    ("36 mu", "2"),
])
def test_mu_doi_sang_em(text, gia_tri):
    ket_qua = khop_kich_thuoc(text)
    assert ket_qua[0] == gia_tri
    assert ket_qua[1] == "em"


@pytest.mark.parametrize("text, ky_vong", [
    (r"\linewidth", ("1", r"\linewidth")),
    (r"0.5\textwidth", ("0.5", r"\textwidth")),
    (r" .3 \columnwidth ", (".3", r"\columnwidth")),
])
def test_tu_khoa_do_dai(text, ky_vong):
    assert khop_kich_thuoc(text)[:2] == ky_vong
    assert la_kich_thuoc_hop_le(text)


@pytest.mark.parametrize("text", [
    "", "3", "cm", "nope", "3cmx", "3 c m", "--3cm", "3km", r"\parindent", r"2\linewidthx",
])
def test_kich_thuoc_khong_hop_le(text):
    assert khop_kich_thuoc(text) == (None, None, 0)
    assert not la_kich_thuoc_hop_le(text)


def test_tra_cuu():
    bang = {'l': 'left'}
    assert tra_cuu('l', bang, '') == 'left'
    assert tra_cuu('x', bang, '') == ''
    assert tra_cuu('x', bang) is None
