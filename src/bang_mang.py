# bang_mang.py - Thông tin mảng/bảng (array metadata) nhận kết quả phân tích mẫu cột
#
# Bộ phân tích mẫu cột chỉ ghi vào đây ở bước tổng hợp cuối:
#   - arraydef['columnalign'] : căn lề từng cột, nối bằng dấu cách
#   - arraydef['columnwidth'] : độ rộng từng cột (chỉ có nếu khai báo độ rộng)
#   - arraydef['columnlines'] : đường kẻ giữa các cột (chỉ có nếu khai báo đường kẻ)
#   - frame                   : khung trái/phải của bảng
#   - dashed                  : khung trái là nét đứt
#   - ralign                  : (căn dọc, độ rộng, căn lề) cho cột p/m/b/w/W


class ThongTinMang:

    def __init__(self, ralign: list = None):
        self.arraydef = {}
        self.frame = []
        self.dashed = False
        # ralign do caller sở hữu, bộ phân tích ghi trực tiếp vào list này
        self.ralign = ralign if ralign is not None else []

    @property
    def columnalign(self):
        return self.arraydef.get('columnalign')

    @property
    def columnwidth(self):
        return self.arraydef.get('columnwidth')

    @property
    def columnlines(self):
        return self.arraydef.get('columnlines')

    def to_dict(self) -> dict:
        # Dạng dict để trả JSON qua API
        return {
            'arraydef': dict(self.arraydef),
            'frame': list(self.frame),
            'dashed': self.dashed,
            'ralign': [list(muc) if muc is not None else None for muc in self.ralign],
        }

    def __repr__(self):
        return (f"ThongTinMang(arraydef={self.arraydef!r}, frame={self.frame!r}, "
                f"dashed={self.dashed!r}, ralign={self.ralign!r})")
