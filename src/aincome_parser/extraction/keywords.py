"""
Keyword tables shared by the extraction pipeline and the intent classifier.

All tables are immutable. Matching is plain substring containment on the
lowercased message, so order inside a tuple only matters where the caller
stops at the first hit.
"""
from decimal import Decimal
from types import MappingProxyType

# Amount unit tokens in priority order: the first pattern that matches wins,
# so "triệu" must stay ahead of "tr".
AMOUNT_UNITS: tuple[tuple[str, Decimal], ...] = (
    ("triệu", Decimal(1_000_000)),
    ("tr", Decimal(1_000_000)),
    ("tỷ", Decimal(1_000_000_000)),
    ("nghìn", Decimal(1_000)),
    ("k", Decimal(1_000)),
    ("đồng", Decimal(1)),
    ("vnd", Decimal(1)),
)

# Date words stripped from notes.
NOTE_DATE_WORDS: tuple[str, ...] = ("hôm nay", "ngày", "tháng", "năm")

INCOME_KEYWORDS: tuple[str, ...] = ("nhận", "được", "thu", "lương", "thưởng", "bán")
EXPENSE_KEYWORDS: tuple[str, ...] = ("mua", "chi", "trả", "đóng", "nộp", "ăn", "uống")

# Keyed by lowercased category name.
CATEGORY_KEYWORDS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    "ăn uống": (
        "ăn", "uống", "phở", "cơm", "bún", "cà phê", "cafe", "trà", "nước",
        "nhà hàng", "quán", "đồ ăn", "thức ăn", "buffet", "lẩu", "bánh", "kem",
        "bữa", "sáng", "trưa", "tối",
    ),
    "đi lại": (
        "xăng", "xe", "taxi", "grab", "gojek", "be", "xe buýt", "xe bus", "tàu",
        "máy bay", "vé", "di chuyển", "gửi xe", "đổ xăng", "bơm xăng",
    ),
    "mua sắm": (
        "mua", "shopping", "siêu thị", "chợ", "quần áo", "giày", "dép", "túi",
        "đồ dùng", "sắm",
    ),
    "giải trí": (
        "phim", "xem", "game", "vui chơi", "du lịch", "karaoke", "bar", "pub",
        "club", "gym",
    ),
    "y tế": (
        "thuốc", "bác sĩ", "bệnh viện", "phòng khám", "khám", "chữa", "sức khỏe",
        "đau", "ốm",
    ),
    "sức khỏe": (
        "thuốc", "bác sĩ", "bệnh viện", "phòng khám", "khám", "chữa", "đau", "ốm",
    ),
    "học tập": (
        "học", "sách", "vở", "bút", "trường", "học phí", "khóa học", "lớp",
    ),
    "giáo dục": (
        "học", "sách", "vở", "bút", "trường", "học phí", "khóa học", "lớp",
    ),
    "nhà cửa": (
        "điện", "nước", "gas", "internet", "wifi", "thuê nhà", "nhà", "phòng",
        "tiền điện", "tiền nước",
    ),
    "hóa đơn & dịch vụ": (
        "hóa đơn", "cước", "điện thoại", "internet", "wifi", "truyền hình",
    ),
    "quà tặng": ("quà", "tặng", "sinh nhật", "cưới", "mừng"),
    "chăm sóc cá nhân": ("cắt tóc", "gội đầu", "spa", "mỹ phẩm", "nail"),
    "lương": ("lương", "thưởng", "bonus", "thu nhập", "trả lương"),
    "thưởng": ("thưởng", "bonus", "lì xì"),
    "đầu tư": ("đầu tư", "cổ tức", "chứng khoán", "lãi"),
    "công việc thêm": ("làm thêm", "freelance", "part-time", "dự án"),
    "bán hàng": ("bán", "sell", "doanh thu"),
})

OTHER_CATEGORY_NAMES: tuple[str, ...] = ("Khác", "Other")

# Intent classifier vocabularies.
TRANSACTION_VERBS: tuple[str, ...] = (
    "mua", "bán", "chi", "thu", "trả", "nạp", "nộp", "đóng",
    "ăn", "uống", "mượn", "cho vay", "vay", "nhận", "được",
    "tiêu", "tiết kiệm", "gửi", "rút", "chuyển",
)
MONEY_WORDS: tuple[str, ...] = (
    "đồng", "nghìn", "triệu", "tỷ", "k", "tr", "vnd", "đ",
    "tiền", "giá", "phí", "cước", "lương", "thưởng",
)
SPENDING_CATEGORY_WORDS: tuple[str, ...] = (
    "phở", "cơm", "xăng", "điện", "nước", "cà phê", "cafe",
    "trà", "thuốc", "xe", "taxi", "grab", "siêu thị", "chợ",
    "quần áo", "giày", "phim", "game", "sách", "học phí",
)
TIME_WORDS: tuple[str, ...] = (
    "hôm nay", "ngày", "tháng", "năm", "tuần", "hôm qua",
    "sáng", "chiều", "tối", "trưa", "vừa", "mới",
)

GREETING_WORDS: tuple[str, ...] = (
    "chào", "xin chào", "hello", "hi", "hey", "helo",
    "alo", "alô", "chào bạn", "chào anh", "chào chị",
)
QUESTION_WORDS: tuple[str, ...] = (
    "là gì", "thế nào", "như thế nào", "sao", "tại sao",
    "làm sao", "khi nào", "ở đâu", "ai", "có thể",
)
THANKS_WORDS: tuple[str, ...] = ("cảm ơn", "thanks", "thank you", "cám ơn", "tks", "ty")
GOODBYE_WORDS: tuple[str, ...] = ("tạm biệt", "bye", "goodbye", "hẹn gặp", "bái bai")
CAPABILITY_QUESTIONS: tuple[str, ...] = ("làm gì", "giúp gì")
