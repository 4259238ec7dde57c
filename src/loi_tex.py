# loi_tex.py - Lỗi cú pháp TeX có mã lỗi + mẫu thông báo
#
# Mỗi lỗi mang:
#   - ma_loi:         tên loại lỗi (BadColumnCharacter, MissingCloseBrace, ...)
#   - mau_thong_diep: mẫu thông báo, %1..%9 hoặc %{n} là vị trí tham số
#   - tham_so:        các giá trị điền vào mẫu (thường là ký tự cột gây lỗi)

import re

from config import THONG_DIEP_LOI

_MAU_THAM_SO = re.compile(r'%(\d|\{\d+\})')


def dien_thong_diep(mau: str, tham_so) -> str:
    # Thay %1, %{12}... bằng tham số tương ứng, giữ nguyên nếu thiếu
    def _thay(match):
        so = match.group(1).strip('{}')
        vi_tri = int(so) - 1
        if 0 <= vi_tri < len(tham_so):
            return str(tham_so[vi_tri])
        return match.group(0)

    return _MAU_THAM_SO.sub(_thay, mau)


class LoiTex(Exception):
    # Lỗi khi phân tích cú pháp mẫu TeX, dừng toàn bộ lần xử lý hiện tại

    def __init__(self, ma_loi: str, mau_thong_diep: str = None, *tham_so):
        if mau_thong_diep is None:
            mau_thong_diep = THONG_DIEP_LOI.get(ma_loi, ma_loi)
        self.ma_loi = ma_loi
        self.mau_thong_diep = mau_thong_diep
        self.tham_so = tham_so
        super().__init__(dien_thong_diep(mau_thong_diep, tham_so))

    @property
    def thong_diep(self) -> str:
        return str(self)

    def __repr__(self):
        return f"LoiTex({self.ma_loi!r}, {self.thong_diep!r})"
