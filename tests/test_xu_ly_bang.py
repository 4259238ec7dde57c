import pytest
from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn

from config import VTOP
from loi_tex import LoiTex
from phan_tich_cot import BoPhanTichCot
from xu_ly_bang import BoXuLyBang, doc_cac_bang_word


def _tao_bang(tai_lieu=None, so_cot=3, twips=None, can_le=None):
    # twips: độ rộng từng cột (None = xóa w:w); can_le: căn lề hàng đầu
    tai_lieu = tai_lieu or Document()
    bang = tai_lieu.add_table(rows=2, cols=so_cot)

    grid = bang._tbl.find(qn('w:tblGrid'))
    for k, grid_col in enumerate(grid.findall(qn('w:gridCol'))):
        gia_tri = twips[k] if twips else None
        if gia_tri is None:
            grid_col.attrib.pop(qn('w:w'), None)
        else:
            grid_col.set(qn('w:w'), str(gia_tri))

    for k, canh in enumerate(can_le or []):
        if canh is not None:
            bang.rows[0].cells[k].paragraphs[0].alignment = canh
    return bang


def _dat_vien(bang, **cac_vien):
    tblPr = bang._tbl.find(qn('w:tblPr'))
    tblBorders = OxmlElement('w:tblBorders')
    for ten, gia_tri in cac_vien.items():
        vien = OxmlElement(f'w:{ten}')
        vien.set(qn('w:val'), gia_tri)
        tblBorders.append(vien)
    tblPr.append(tblBorders)


def test_bang_khong_do_rong_khong_vien():
    bang = _tao_bang(can_le=[None, WD_ALIGN_PARAGRAPH.CENTER, WD_ALIGN_PARAGRAPH.RIGHT])
    assert BoXuLyBang().tao_mau_cot(bang) == "lcr"


def test_can_le_deu_va_justify_la_trai():
    bang = _tao_bang(so_cot=2, can_le=[WD_ALIGN_PARAGRAPH.JUSTIFY, WD_ALIGN_PARAGRAPH.LEFT])
    assert BoXuLyBang().tao_mau_cot(bang) == "ll"


def test_bang_co_do_rong():
    bang = _tao_bang(
        twips=[1701, 1417, None],
        can_le=[None, WD_ALIGN_PARAGRAPH.CENTER, WD_ALIGN_PARAGRAPH.RIGHT],
    )
    assert BoXuLyBang().tao_mau_cot(bang) == "p{3cm}w{c}{2.5cm}r"


def test_bang_co_vien_truc_tiep():
    bang = _tao_bang(can_le=[None, WD_ALIGN_PARAGRAPH.CENTER, WD_ALIGN_PARAGRAPH.RIGHT])
    _dat_vien(bang, top='single', left='single', insideV='dashed', right='nil')
    assert BoXuLyBang().tao_mau_cot(bang) == "|l:c:r"


def test_vien_start_end():
    bang = _tao_bang(so_cot=2)
    _dat_vien(bang, start='double', end='dotted')
    assert BoXuLyBang().tao_mau_cot(bang) == "|ll:"


def test_vien_theo_style_table_grid():
    bang = _tao_bang(so_cot=2)
    bang.style = 'Table Grid'
    assert BoXuLyBang().tao_mau_cot(bang) == "|l|l|"


def test_xu_ly_bang_tra_thong_tin_mang():
    bang = _tao_bang(
        twips=[1701, 1417, None],
        can_le=[None, WD_ALIGN_PARAGRAPH.CENTER, WD_ALIGN_PARAGRAPH.RIGHT],
    )
    _dat_vien(bang, left='single', insideV='single', right='single')

    mau_cot, mang = BoXuLyBang().xu_ly_bang(bang)

    assert mau_cot == "|p{3cm}|w{c}{2.5cm}|r|"
    assert mang.columnalign == "left center right"
    assert mang.columnwidth == "3cm 2.5cm auto"
    assert mang.columnlines == "solid solid"
    assert mang.frame == ['left', 'right']
    assert mang.ralign == [(VTOP, "3cm", "left"), (VTOP, "2.5cm", "center")]


def test_xu_ly_bang_dung_bo_phan_tich_rieng():
    bo = BoPhanTichCot()
    bo.dang_ky_cot('l', lambda tt: bo.cot_can_le(tt, 'right'))
    bang = _tao_bang(so_cot=2)
    _, mang = BoXuLyBang(bo).xu_ly_bang(bang)
    assert mang.columnalign == "right right"


def test_xu_ly_bang_nem_loi_tex():
    bo = BoPhanTichCot()
    del bo.bo_xu_ly['l']
    bang = _tao_bang(so_cot=1)
    with pytest.raises(LoiTex) as exc:
        BoXuLyBang(bo).xu_ly_bang(bang)
    assert exc.value.ma_loi == 'BadColumnCharacter'


def test_doc_cac_bang_word(tmp_path):
    tai_lieu = Document()
    tai_lieu.add_paragraph("Bảng 1")
    _tao_bang(tai_lieu, so_cot=2, can_le=[None, WD_ALIGN_PARAGRAPH.CENTER])
    tai_lieu.add_paragraph("Bảng 2")
    bang_hai = _tao_bang(tai_lieu, so_cot=1, twips=[1701])
    _dat_vien(bang_hai, left='dashed', right='single')

    duong_dan = tmp_path / "hai_bang.docx"
    tai_lieu.save(str(duong_dan))

    ket_qua = doc_cac_bang_word(str(duong_dan))

    assert [b['chi_so'] for b in ket_qua] == [0, 1]
    assert ket_qua[0]['mau_cot'] == "lc"
    assert ket_qua[0]['thong_tin']['arraydef'] == {'columnalign': 'left center'}
    assert ket_qua[1]['mau_cot'] == ":p{3cm}|"
    assert ket_qua[1]['thong_tin']['frame'] == ['left', 'right']
    assert ket_qua[1]['thong_tin']['dashed'] is True
    assert ket_qua[1]['thong_tin']['ralign'] == [[VTOP, "3cm", "left"]]
