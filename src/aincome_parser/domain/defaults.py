from aincome_parser.models import Category, TransactionType

# Seeded for every new account; ids are stable so clients can cache them.
_INCOME = (
    ("Lương", "💰"),
    ("Thưởng", "🎁"),
    ("Đầu tư", "📈"),
    ("Công việc thêm", "💼"),
    ("Thu nhập khác", "🎯"),
)
_EXPENSE = (
    ("Ăn uống", "🍔"),
    ("Đi lại", "🚗"),
    ("Mua sắm", "🛒"),
    ("Giải trí", "🎮"),
    ("Sức khỏe", "💊"),
    ("Nhà cửa", "🏠"),
    ("Giáo dục", "📚"),
    ("Gia đình", "👨‍👩‍👧"),
    ("Hóa đơn & Dịch vụ", "📱"),
    ("Chăm sóc cá nhân", "💇"),
    ("Quà tặng", "🎁"),
    ("Chi phí khác", "📦"),
)


def default_categories() -> list[Category]:
    categories = [
        Category(id=f"income-{index}", name=name, type=TransactionType.INCOME, icon=icon)
        for index, (name, icon) in enumerate(_INCOME, start=1)
    ]
    categories.extend(
        Category(id=f"expense-{index}", name=name, type=TransactionType.EXPENSE, icon=icon)
        for index, (name, icon) in enumerate(_EXPENSE, start=1)
    )
    return categories
