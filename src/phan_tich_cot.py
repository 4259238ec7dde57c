# phan_tich_cot.py - Phân tích mẫu cột của môi trường array/tabular
#
# Mẫu cột (ví dụ |l|c|p{3cm}|r|) được quét một lượt từ trái sang phải:
#   1. Mỗi ký tự tra bảng xử lý (bo_xu_ly), ký tự lạ → BadColumnCharacter
#   2. Hàm xử lý có thể đọc thêm tham số {...} và ghi vào TrangThaiCot
#   3. Hết mẫu → tổng hợp căn lề / độ rộng / đường kẻ / khung vào ThongTinMang
#
# Hai hệ chỉ số khác nhau:
#   - chỉ số cột (j):       calign, cwidth, ralign
#   - vị trí đường kẻ (j):  clines[0] là khung trái, clines[k] nằm sau cột k-1
#
# Cách dùng:
#   mang = phan_tich_mau_cot('|l|c|p{3cm}|')
#   mang.arraydef['columnalign']   # 'left center left'

from config import (
    MAP_CAN_LE, CAN_LE_MAC_DINH, VTOP, VCENTER, VBOX,
    VIEN_LIEN, VIEN_DUT, VIEN_KHONG, DO_RONG_TU_DONG,
    KHUNG_TRAI, KHUNG_PHAI, KY_TU_DANH_RIENG, THONG_DIEP_LOI,
)
from bang_mang import ThongTinMang
from loi_tex import LoiTex
from utils import la_kich_thuoc_hop_le, tra_cuu


def _gan(danh_sach: list, chi_so: int, gia_tri):
    # Ghi vào vị trí chi_so, nới list bằng None nếu chưa đủ dài
    if chi_so >= len(danh_sach):
        danh_sach.extend([None] * (chi_so + 1 - len(danh_sach)))
    danh_sach[chi_so] = gia_tri


class TrangThaiCot:
    # Trạng thái các cột đã phân tích, chỉ tồn tại trong một lần xu_ly()

    def __init__(self, template: str, ralign: list):
        self.template = template
        self.i = 0            # vị trí hiện tại trong mẫu
        self.c = ''           # ký tự cột vừa đọc (dùng cho thông báo lỗi)
        self.j = 0            # số thứ tự cột đầu ra
        self.calign = []      # căn lề từng cột
        self.cwidth = []      # độ rộng khai báo (thưa, None = auto)
        self.clines = []      # đường kẻ theo vị trí đường kẻ
        self.cstart = []      # khai báo '>' (chưa dùng)
        self.cend = []        # khai báo '<' (chưa dùng)
        self.ralign = ralign  # list của caller, ghi trực tiếp

    def con_ky_tu(self) -> bool:
        return self.i < len(self.template)


class BoPhanTichCot:
    # Bộ phân tích mẫu cột; bảng xử lý chỉ đổi qua dang_ky_cot(), không đổi khi đang phân tích

    def __init__(self):
        self.bo_xu_ly = {
            'l': lambda tt: self.cot_can_le(tt, MAP_CAN_LE['l']),
            'c': lambda tt: self.cot_can_le(tt, MAP_CAN_LE['c']),
            'r': lambda tt: self.cot_can_le(tt, MAP_CAN_LE['r']),
            'p': lambda tt: self.lay_cot(tt, VTOP),
            'm': lambda tt: self.lay_cot(tt, VCENTER),
            'b': lambda tt: self.lay_cot(tt, VBOX),
            'w': lambda tt: self.lay_cot(tt, VTOP, ''),
            'W': lambda tt: self.lay_cot(tt, VTOP, ''),
            '|': lambda tt: _gan(tt.clines, tt.j, VIEN_LIEN),
            ':': lambda tt: _gan(tt.clines, tt.j, VIEN_DUT),
            # Chưa dùng khi dựng bảng
            '>': lambda tt: _gan(tt.cstart, tt.j, self.lay_ngoac(tt)),
            '<': self._khai_bao_cuoi_cot,
            # Bỏ qua
            '@': lambda tt: self.lay_ngoac(tt),
            '!': lambda tt: self.lay_ngoac(tt),
            ' ': lambda tt: None,
        }

    def dang_ky_cot(self, ky_tu: str, ham_xu_ly):
        """Đăng ký hàm xử lý cho một loại cột mới.

        ham_xu_ly nhận TrangThaiCot, có thể gọi lay_cot/lay_ngoac của bộ phân tích.
        Chỉ đăng ký trước khi bắt đầu phân tích, không đăng ký xen kẽ.

        Raises:
            ValueError: ky_tu không phải đúng một ký tự, hoặc là ký tự cú pháp { } \\
            TypeError: ham_xu_ly không gọi được
        """
        if not isinstance(ky_tu, str) or len(ky_tu) != 1:
            raise ValueError(f"Loại cột phải là đúng một ký tự: {ky_tu!r}")
        if ky_tu in KY_TU_DANH_RIENG:
            raise ValueError(f"Không thể dùng ký tự cú pháp làm loại cột: {ky_tu!r}")
        if not callable(ham_xu_ly):
            raise TypeError(f"Hàm xử lý cho cột {ky_tu!r} không gọi được")
        self.bo_xu_ly[ky_tu] = ham_xu_ly

    def xu_ly(self, template: str, mang: ThongTinMang) -> ThongTinMang:
        """Phân tích mẫu cột và ghi kết quả vào mang.

        Args:
            template: mẫu cột, ví dụ '|l|c|p{3cm}|'
            mang: ThongTinMang của caller (ralign được ghi trực tiếp)

        Raises:
            LoiTex: ký tự lạ, thiếu tham số, thiếu ngoặc đóng, sai kích thước
        """
        tt = TrangThaiCot(template, mang.ralign)

        while tt.con_ky_tu():
            c = tt.c = tt.template[tt.i]
            tt.i += 1
            ham = self.bo_xu_ly.get(c)
            if ham is None:
                raise LoiTex('BadColumnCharacter', THONG_DIEP_LOI['BadColumnCharacter'], c)
            ham(tt)

        self._tong_hop(tt, mang)
        return mang

    def _tong_hop(self, tt: TrangThaiCot, mang: ThongTinMang):
        # Gộp các vector theo cột thành arraydef / frame / dashed
        calign = tt.calign
        so_cot = len(calign)
        mang.arraydef['columnalign'] = ' '.join(calign)

        if tt.cwidth:
            cwidth = list(tt.cwidth)
            if len(cwidth) < so_cot:
                cwidth.extend([DO_RONG_TU_DONG] * (so_cot - len(cwidth)))
            mang.arraydef['columnwidth'] = ' '.join(w or DO_RONG_TU_DONG for w in cwidth)

        if tt.clines:
            clines = list(tt.clines)
            # Vị trí 0 là khung trái, không phải đường kẻ giữa cột
            if clines[0]:
                mang.frame.append(KHUNG_TRAI)
                mang.dashed = clines[0] == VIEN_DUT
            if len(clines) > so_cot:
                mang.frame.append(KHUNG_PHAI)
                clines.pop()
            elif len(clines) < so_cot:
                clines.extend([VIEN_KHONG] * (so_cot - len(clines)))
            mang.arraydef['columnlines'] = ' '.join(l or VIEN_KHONG for l in clines[1:])

    def cot_can_le(self, tt: TrangThaiCot, can_le: str):
        # Cột l/c/r: chỉ có căn lề
        _gan(tt.calign, tt.j, can_le)
        tt.j += 1

    def lay_cot(self, tt: TrangThaiCot, can_doc: str, can_le: str = CAN_LE_MAC_DINH):
        # Đọc cột p/m/b/w/W; can_le rỗng nghĩa là đọc căn lề từ tham số
        _gan(tt.calign, tt.j, can_le or self.lay_can_le(tt))
        _gan(tt.cwidth, tt.j, self.lay_kich_thuoc(tt))
        _gan(tt.ralign, tt.j, (can_doc, tt.cwidth[tt.j], tt.calign[tt.j]))
        tt.j += 1

    def lay_kich_thuoc(self, tt: TrangThaiCot) -> str:
        # Đọc tham số độ rộng, phải là kích thước TeX hợp lệ
        kich_thuoc = self.lay_ngoac(tt)
        if not la_kich_thuoc_hop_le(kich_thuoc):
            raise LoiTex('MissingColumnDimOrUnits', THONG_DIEP_LOI['MissingColumnDimOrUnits'], tt.c)
        return kich_thuoc

    def lay_can_le(self, tt: TrangThaiCot) -> str:
        # Đọc tham số căn lề: l/c/r → left/center/right, khác → ''
        can_le = self.lay_ngoac(tt)
        return tra_cuu(can_le.lower(), MAP_CAN_LE, '')

    def lay_ngoac(self, tt: TrangThaiCot) -> str:
        # Đọc tham số: {...} (cân ngoặc, \ thoát ký tự kế tiếp) hoặc một ký tự đơn
        while tt.con_ky_tu() and tt.template[tt.i] == ' ':
            tt.i += 1
        if not tt.con_ky_tu():
            raise LoiTex('MissingArgForColumn', THONG_DIEP_LOI['MissingArgForColumn'], tt.c)

        if tt.template[tt.i] != '{':
            ky_tu = tt.template[tt.i]
            tt.i += 1
            return ky_tu

        tt.i += 1
        bat_dau = tt.i
        so_ngoac = 1
        while tt.con_ky_tu():
            ky_tu = tt.template[tt.i]
            tt.i += 1
            if ky_tu == '\\':
                tt.i += 1
            elif ky_tu == '{':
                so_ngoac += 1
            elif ky_tu == '}':
                so_ngoac -= 1
                if so_ngoac == 0:
                    return tt.template[bat_dau:tt.i - 1]

        raise LoiTex('MissingCloseBrace', THONG_DIEP_LOI['MissingCloseBrace'])

    def _khai_bao_cuoi_cot(self, tt: TrangThaiCot):
        # '<' gắn vào cột đứng trước, nên phải có ít nhất một cột
        if tt.j == 0:
            raise LoiTex('MisplacedColumnEnd', THONG_DIEP_LOI['MisplacedColumnEnd'], tt.c)
        _gan(tt.cend, tt.j - 1, self.lay_ngoac(tt))


_bo_phan_tich_mac_dinh = BoPhanTichCot()


def xu_ly_mau_cot(template: str, mang: ThongTinMang) -> ThongTinMang:
    # Phân tích bằng bộ phân tích dùng chung
    return _bo_phan_tich_mac_dinh.xu_ly(template, mang)


def phan_tich_mau_cot(template: str, bo_phan_tich: BoPhanTichCot = None) -> ThongTinMang:
    # Tạo ThongTinMang mới, phân tích mẫu và trả về
    mang = ThongTinMang()
    (bo_phan_tich or _bo_phan_tich_mac_dinh).xu_ly(template, mang)
    return mang
