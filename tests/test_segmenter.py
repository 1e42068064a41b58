from aincome_parser.extraction.segmenter import split_segments


def test_newlines_split_and_drop_blank_lines() -> None:
    assert split_segments("Ăn phở 30k\n\n  Cafe 20k  \n") == ["Ăn phở 30k", "Cafe 20k"]


def test_commas_split_when_every_piece_has_digits() -> None:
    assert split_segments("Ăn phở 30k, cafe 50k") == ["Ăn phở 30k", "cafe 50k"]


def test_commas_kept_when_a_piece_has_no_digits() -> None:
    message = "Ăn phở, uống trà 30k"
    assert split_segments(message) == [message]


def test_single_segment() -> None:
    assert split_segments("  Nhận lương 15 triệu ") == ["Nhận lương 15 triệu"]


def test_thousands_separator_is_still_split() -> None:
    # Known ambiguity: both halves contain digits.
    assert split_segments("1,500 đồng tiền ăn") == ["1", "500 đồng tiền ăn"]


def test_blank_message_has_no_segments() -> None:
    assert split_segments("   ") == []
