# xu_ly_bang.py - Bộ xử lý bảng Word: dựng mẫu cột LaTeX + phân tích thành ThongTinMang
#
# Bảng Word (python-docx) → mẫu cột, ví dụ |p{3cm}|w{c}{2.5cm}|r|:
#   - Số cột theo w:tblGrid, fallback theo số tc lớn nhất
#   - Độ rộng cột theo w:gridCol/@w:w (twips → cm)
#   - Căn lề theo đoạn văn đầu tiên của hàng đầu tiên
#   - Đường kẻ theo w:tblBorders (left / insideV / right), style bảng làm mặc định

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml.ns import qn
from docx.table import Table
from lxml import etree

from config import MAP_VIEN_WORD, SO_LE_DO_RONG_CM
from bang_mang import ThongTinMang
from phan_tich_cot import BoPhanTichCot

TWIPS_MOT_INCH = 1440
CM_MOT_INCH = 2.54

# Căn lề đoạn văn Word → ký tự mẫu cột
MAP_CAN_LE_WORD = {
    WD_ALIGN_PARAGRAPH.CENTER: 'c',
    WD_ALIGN_PARAGRAPH.RIGHT: 'r',
}


class BoXuLyBang:
    # Bộ xử lý bảng Word, tách phần đọc OOXML khỏi bộ phân tích mẫu cột

    def __init__(self, bo_phan_tich: BoPhanTichCot = None):
        self.bo_phan_tich = bo_phan_tich or BoPhanTichCot()

    def _lay_so_cot(self, bang: Table) -> int:
        # Ước lượng số cột theo tblGrid, fallback theo số tc lớn nhất
        tbl = bang._tbl
        so_cot = 0
        grid = tbl.find(qn('w:tblGrid'))
        if grid is not None:
            so_cot = len(grid.findall(qn('w:gridCol')))

        if so_cot <= 0:
            for tr in tbl.tr_lst:
                so_cot = max(so_cot, len(list(tr.tc_lst)))
        return so_cot

    def _lay_do_rong_cot(self, bang: Table, so_cot: int) -> list:
        # Độ rộng từng cột dạng '3.5cm', None nếu Word không ghi
        ket_qua = [None] * so_cot
        grid = bang._tbl.find(qn('w:tblGrid'))
        if grid is None:
            return ket_qua

        for k, grid_col in enumerate(grid.findall(qn('w:gridCol'))[:so_cot]):
            val = grid_col.get(qn('w:w'))
            if val is None:
                continue
            try:
                twips = int(val)
            except ValueError:
                continue
            if twips <= 0:
                continue
            do_rong_cm = round(twips / TWIPS_MOT_INCH * CM_MOT_INCH, SO_LE_DO_RONG_CM)
            ket_qua[k] = f"{do_rong_cm:g}cm"
        return ket_qua

    def _lay_can_le_cot(self, bang: Table, so_cot: int) -> list:
        # Căn lề từng cột theo đoạn văn đầu tiên của ô ở hàng đầu
        ket_qua = ['l'] * so_cot
        if len(bang.rows) == 0:
            return ket_qua

        for k, cell in enumerate(bang.rows[0].cells[:so_cot]):
            if not cell.paragraphs:
                continue
            ket_qua[k] = MAP_CAN_LE_WORD.get(cell.paragraphs[0].alignment, 'l')
        return ket_qua

    def _doc_tbl_borders(self, tblPr) -> dict:
        # w:tblBorders → {'left': '|', 'insideV': ':', ...}
        vien = {}
        if tblPr is None:
            return vien
        tblBorders = tblPr.find(qn('w:tblBorders'))
        if tblBorders is None:
            return vien

        for con in tblBorders:
            if not isinstance(con.tag, str):
                continue
            ten = etree.QName(con).localname
            gia_tri = con.get(qn('w:val'))
            if not gia_tri:
                continue
            vien[ten] = MAP_VIEN_WORD.get(gia_tri, '|')

        # Word bản mới ghi start/end thay cho left/right
        if 'left' not in vien and 'start' in vien:
            vien['left'] = vien['start']
        if 'right' not in vien and 'end' in vien:
            vien['right'] = vien['end']
        return vien

    def _lay_vien(self, bang: Table) -> dict:
        # Đường viền của style bảng, ghi đè bằng định dạng trực tiếp trên bảng
        vien = {}
        style = bang.style
        if style is not None:
            vien.update(self._doc_tbl_borders(style.element.find(qn('w:tblPr'))))
        vien.update(self._doc_tbl_borders(bang._tbl.find(qn('w:tblPr'))))
        return vien

    def _tao_cot(self, can_le: str, do_rong: str) -> str:
        if do_rong is None:
            return can_le
        if can_le == 'l':
            return f"p{{{do_rong}}}"
        return f"w{{{can_le}}}{{{do_rong}}}"

    def tao_mau_cot(self, bang: Table) -> str:
        # Dựng mẫu cột LaTeX cho bảng Word
        so_cot = self._lay_so_cot(bang)
        do_rong = self._lay_do_rong_cot(bang, so_cot)
        can_le = self._lay_can_le_cot(bang, so_cot)
        vien = self._lay_vien(bang)

        cac_cot = [self._tao_cot(can_le[k], do_rong[k]) for k in range(so_cot)]
        return vien.get('left', '') + vien.get('insideV', '').join(cac_cot) + vien.get('right', '')

    def xu_ly_bang(self, bang: Table):
        # Trả (mẫu cột, ThongTinMang); LoiTex được ném tiếp cho caller
        mau_cot = self.tao_mau_cot(bang)
        mang = ThongTinMang()
        self.bo_phan_tich.xu_ly(mau_cot, mang)
        return mau_cot, mang


def doc_cac_bang_word(duong_dan_word: str, bo_xu_ly: BoXuLyBang = None) -> list:
    # Phân tích mọi bảng cấp cao nhất trong file .docx
    bo_xu_ly = bo_xu_ly or BoXuLyBang()
    tai_lieu = Document(duong_dan_word)

    ket_qua = []
    for chi_so, bang in enumerate(tai_lieu.tables):
        mau_cot, mang = bo_xu_ly.xu_ly_bang(bang)
        ket_qua.append({
            'chi_so': chi_so,
            'mau_cot': mau_cot,
            'thong_tin': mang.to_dict(),
        })
    return ket_qua
