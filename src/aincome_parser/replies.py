"""Canned assistant texts used when no conversational model is available."""
from aincome_parser.extraction.keywords import (
    CAPABILITY_QUESTIONS,
    GOODBYE_WORDS,
    GREETING_WORDS,
    THANKS_WORDS,
)
from aincome_parser.extraction.normalizer import contains_any, normalize

WELCOME = (
    'Chào bạn! 👋 Bạn có thể nói tự nhiên về giao dịch, ví dụ:\n\n'
    '"Ăn phở 50k hôm nay"\n"Nhận lương 15 triệu"\n"Mua xăng 200k"\n\n'
    'Mình sẽ tự động hiểu và đề xuất thông tin cho bạn!'
)
CONFIRM_SINGLE = "Mình đã hiểu! Hãy kiểm tra thông tin và xác nhận nhé:"
CONFIRM_MULTIPLE = "Mình đã hiểu {count} giao dịch! Hãy kiểm tra thông tin và xác nhận nhé:"
PARSE_FAILED = (
    'Xin lỗi, mình không thể hiểu thông tin giao dịch. Bạn có thể thử lại với các thông tin '
    'rõ ràng hơn như: "Ăn phở 50k" hoặc "Nhận lương 15 triệu"?\n\n'
    'Để nhập nhiều giao dịch, bạn có thể viết:\n- Ăn phở 30k, cafe 50k\n- Hoặc mỗi giao dịch một dòng'
)
UNKNOWN_INTENT = (
    "Mình chưa hiểu rõ ý bạn. Bạn muốn thêm giao dịch hay chỉ đơn giản là trò chuyện? "
    "Nếu muốn thêm giao dịch, hãy nói rõ số tiền và loại chi tiêu nhé! 😊"
)

_GREETING_REPLY = (
    'Chào bạn! 👋 Mình có thể giúp bạn thêm giao dịch bằng cách nói tự nhiên. '
    'Ví dụ: "Ăn phở 50k hôm nay" hoặc "Lương tháng 10 triệu". Hãy thử nhé!'
)
_THANKS_REPLY = "Không có gì! 😊 Mình luôn sẵn sàng giúp bạn quản lý tài chính."
_GOODBYE_REPLY = "Tạm biệt! Hẹn gặp lại bạn! 👋"
_CAPABILITY_REPLY = (
    'Mình có thể giúp bạn:\n\n'
    '• Thêm giao dịch thu/chi bằng lời nói tự nhiên\n'
    '• Hiểu tiếng Việt và các cách nói khác nhau\n'
    '• Tự động phân loại và đề xuất hạng mục\n\n'
    'Hãy thử nói về một giao dịch nhé! Ví dụ: "Đổ xăng 200k"'
)
_DEFAULT_REPLY = (
    'Mình hiểu rồi! Nếu bạn muốn thêm giao dịch, hãy nói tự nhiên như '
    '"Ăn cơm 75k" hoặc "Nhận lương 15 triệu" nhé! 😊'
)


def small_talk_reply(message: str) -> str:
    text = normalize(message)
    if contains_any(text, GREETING_WORDS):
        return _GREETING_REPLY
    if contains_any(text, THANKS_WORDS):
        return _THANKS_REPLY
    if contains_any(text, GOODBYE_WORDS):
        return _GOODBYE_REPLY
    if contains_any(text, CAPABILITY_QUESTIONS):
        return _CAPABILITY_REPLY
    return _DEFAULT_REPLY


def confirmation_message(count: int) -> str:
    if count == 1:
        return CONFIRM_SINGLE
    return CONFIRM_MULTIPLE.format(count=count)
