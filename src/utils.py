# utils.py - Tiện ích: kiểm tra kích thước TeX, tra cứu bảng ánh xạ

import re

from config import DON_VI_KICH_THUOC, TU_KHOA_KICH_THUOC, MU_TRONG_MOT_EM

# Số có dấu, chấp nhận dấu phẩy thập phân: 3, -2.5, .5, 3., 1,5
_SO = r'([-+]?(?:[.,]\d+|\d+(?:[.,]\d*)?))'
_DON_VI = '(' + '|'.join(DON_VI_KICH_THUOC) + ')'
_TU_KHOA = '(' + '|'.join(re.escape(k) for k in TU_KHOA_KICH_THUOC) + ')'

MAU_KICH_THUOC = re.compile(r'^\s*' + _SO + r'\s*' + _DON_VI + r'\s*$')
MAU_TU_KHOA = re.compile(r'^\s*(?:' + _SO + r'\s*)?' + _TU_KHOA + r'\s*$')


def _doi_mu_sang_em(gia_tri: str) -> str:
    # 18mu = 1em, giữ 3 chữ số thập phân rồi bỏ số 0 thừa
    so_em = f"{float(gia_tri) / MU_TRONG_MOT_EM:.3f}"
    return so_em.rstrip('0').rstrip('.')


def khop_kich_thuoc(text: str):
    # Phân tích kích thước TeX: trả (giá trị, đơn vị, độ dài khớp) hoặc (None, None, 0)
    if not text:
        return None, None, 0

    match = MAU_KICH_THUOC.match(text)
    if match:
        gia_tri = match.group(1).replace(',', '.')
        don_vi = match.group(2)
        if don_vi == 'mu':
            return _doi_mu_sang_em(gia_tri), 'em', len(match.group(0))
        return gia_tri, don_vi, len(match.group(0))

    match = MAU_TU_KHOA.match(text)
    if match:
        he_so = (match.group(1) or '1').replace(',', '.')
        return he_so, match.group(2), len(match.group(0))

    return None, None, 0


def la_kich_thuoc_hop_le(text: str) -> bool:
    # True nếu text là một kích thước hợp lệ (số + đơn vị, hoặc từ khóa độ dài)
    gia_tri, _, _ = khop_kich_thuoc(text)
    return gia_tri is not None


def tra_cuu(khoa: str, bang: dict, mac_dinh=None):
    # Tra khóa trong bảng ánh xạ, trả mặc định nếu không có
    if khoa in bang:
        return bang[khoa]
    return mac_dinh
