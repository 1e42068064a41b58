from aincome_parser.extraction.notes import extract_note


def test_strips_amount_and_date_words() -> None:
    assert extract_note("Ăn phở 50k hôm nay") == "Ăn phở"


def test_preserves_original_casing() -> None:
    assert extract_note("Ăn Phở Thìn 50K") == "Ăn Phở Thìn"


def test_strips_every_unit_form() -> None:
    assert extract_note("Nhận lương 15 triệu") == "Nhận lương"
    assert extract_note("Lương tháng 10 triệu") == "Lương"


def test_empty_note_is_absent() -> None:
    assert extract_note("50k") is None
    assert extract_note("  200k hôm nay ") is None


def test_truncated_to_100_characters() -> None:
    note = extract_note("mua " + "đồ " * 60 + "50k")
    assert note is not None
    assert len(note) == 100
