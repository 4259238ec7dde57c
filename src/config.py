# config.py - Hằng số và cấu hình cho bộ phân tích mẫu cột LaTeX (column template)

# CĂN LỀ CỘT: ký tự mẫu → từ khóa columnalign
MAP_CAN_LE = {
    'l': 'left',
    'c': 'center',
    'r': 'right',
}

# Căn lề mặc định cho cột p/m/b
CAN_LE_MAC_DINH = 'left'

# CĂN DỌC (vertical class) cho cột p/m/b/w/W
VTOP = 'vtop'          # p, w, W
VCENTER = 'vcenter'    # m
VBOX = 'vbox'          # b

# KIỂU ĐƯỜNG KẺ
VIEN_LIEN = 'solid'
VIEN_DUT = 'dashed'
VIEN_KHONG = 'none'

# Giá trị columnwidth khi cột không khai báo độ rộng
DO_RONG_TU_DONG = 'auto'

# Khung bảng
KHUNG_TRAI = 'left'
KHUNG_PHAI = 'right'

# KÍCH THƯỚC: đơn vị TeX hợp lệ
DON_VI_KICH_THUOC = (
    'pt', 'pc', 'in', 'bp', 'cm', 'mm', 'dd', 'cc', 'sp',
    'em', 'ex', 'mu', 'px',
)

# Từ khóa độ dài (có thể kèm hệ số: 0.5\linewidth)
TU_KHOA_KICH_THUOC = (
    r'\textwidth',
    r'\linewidth',
    r'\columnwidth',
    r'\hsize',
    r'\textheight',
)

# 1mu = 1/18em
MU_TRONG_MOT_EM = 18

# Ký tự cú pháp không được đăng ký làm loại cột
KY_TU_DANH_RIENG = ('{', '}', '\\')

# THÔNG BÁO LỖI: mã lỗi → mẫu thông báo (%1 = tham số thứ nhất)
THONG_DIEP_LOI = {
    'BadColumnCharacter': 'Unknown column specifier: %1',
    'MissingColumnDimOrUnits': 'Missing dimension or its units for %1 column declaration',
    'MissingArgForColumn': 'Missing argument for %1 column declaration',
    'MissingCloseBrace': 'Missing close brace',
    'MisplacedColumnEnd': 'Column declaration %1 must follow a column',
}

# WORD → MẪU CỘT: giá trị w:val của đường viền → ký tự mẫu
MAP_VIEN_WORD = {
    'single': '|',
    'thick': '|',
    'double': '|',
    'triple': '|',
    'thinThickSmallGap': '|',
    'thickThinSmallGap': '|',
    'dashed': ':',
    'dashSmallGap': ':',
    'dotted': ':',
    'dotDash': ':',
    'dotDotDash': ':',
    'nil': '',
    'none': '',
}

# Số chữ số thập phân khi đổi độ rộng cột Word sang cm
SO_LE_DO_RONG_CM = 2

# Kích thước file Word tối đa cho API (10MB)
KICH_THUOC_FILE_TOI_DA = 10 * 1024 * 1024
