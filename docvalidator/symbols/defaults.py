"""
Default symbol vocabularies.

Each entry is (name, value, invalid variants). Both languages define the same
names so validators can look symbols up without knowing the active language.
"""

from __future__ import annotations

SymbolSpec = tuple[str, str, tuple[str, ...]]


DEFAULT_SYMBOLS: tuple[SymbolSpec, ...] = (
    ("FULL_STOP", ".", ("．", "。")),
    ("SPACE", " ", ("　",)),
    ("EXCLAMATION_MARK", "!", ("！",)),
    ("NUMBER_SIGN", "#", ("＃",)),
    ("DOLLAR_SIGN", "$", ("＄",)),
    ("PERCENT_SIGN", "%", ("％",)),
    ("QUESTION_MARK", "?", ("？",)),
    ("AMPERSAND", "&", ("＆",)),
    ("LEFT_PARENTHESIS", "(", ("（",)),
    ("RIGHT_PARENTHESIS", ")", ("）",)),
    ("ASTERISK", "*", ("＊",)),
    ("COMMA", ",", ("、", "，")),
    ("PLUS_SIGN", "+", ("＋",)),
    ("HYPHEN_SIGN", "-", ("ー", "－")),
    ("SLASH", "/", ("／",)),
    ("COLON", ":", ("：",)),
    ("SEMICOLON", ";", ("；",)),
    ("LESS_THAN_SIGN", "<", ("＜",)),
    ("EQUAL_SIGN", "=", ("＝",)),
    ("GREATER_THAN_SIGN", ">", ("＞",)),
    ("AT_MARK", "@", ("＠",)),
    ("LEFT_SQUARE_BRACKET", "[", ("［",)),
    ("RIGHT_SQUARE_BRACKET", "]", ("］",)),
    ("BACKSLASH", "\\", ()),
    ("CIRCUMFLEX_ACCENT", "^", ("＾",)),
    ("LOW_LINE", "_", ("＿",)),
    ("LEFT_CURLY_BRACKET", "{", ("｛",)),
    ("RIGHT_CURLY_BRACKET", "}", ("｝",)),
    ("VERTICAL_BAR", "|", ("｜",)),
    ("TILDE", "~", ("～",)),
    ("LEFT_SINGLE_QUOTATION_MARK", "‘", ()),
    ("RIGHT_SINGLE_QUOTATION_MARK", "’", ()),
    ("LEFT_DOUBLE_QUOTATION_MARK", "“", ()),
    ("RIGHT_DOUBLE_QUOTATION_MARK", "”", ()),
)


# Full-width punctuation; the Latin forms become the invalid variants.
JAPANESE_SYMBOLS: tuple[SymbolSpec, ...] = (
    ("FULL_STOP", "。", (".", "．")),
    ("SPACE", "　", ()),
    ("EXCLAMATION_MARK", "！", ("!",)),
    ("NUMBER_SIGN", "＃", ("#",)),
    ("DOLLAR_SIGN", "＄", ("$",)),
    ("PERCENT_SIGN", "％", ("%",)),
    ("QUESTION_MARK", "？", ("?",)),
    ("AMPERSAND", "＆", ("&",)),
    ("LEFT_PARENTHESIS", "（", ("(",)),
    ("RIGHT_PARENTHESIS", "）", (")",)),
    ("ASTERISK", "＊", ("*",)),
    ("COMMA", "、", (",", "，")),
    ("PLUS_SIGN", "＋", ("+",)),
    ("HYPHEN_SIGN", "ー", ("-",)),
    ("SLASH", "／", ("/",)),
    ("COLON", "：", (":",)),
    ("SEMICOLON", "；", (";",)),
    ("LESS_THAN_SIGN", "＜", ("<",)),
    ("EQUAL_SIGN", "＝", ("=",)),
    ("GREATER_THAN_SIGN", "＞", (">",)),
    ("AT_MARK", "＠", ("@",)),
    ("LEFT_SQUARE_BRACKET", "「", ("[",)),
    ("RIGHT_SQUARE_BRACKET", "」", ("]",)),
    ("BACKSLASH", "￥", ("\\",)),
    ("CIRCUMFLEX_ACCENT", "＾", ("^",)),
    ("LOW_LINE", "＿", ("_",)),
    ("LEFT_CURLY_BRACKET", "｛", ("{",)),
    ("RIGHT_CURLY_BRACKET", "｝", ("}",)),
    ("VERTICAL_BAR", "｜", ("|",)),
    ("TILDE", "～", ("~",)),
    ("LEFT_SINGLE_QUOTATION_MARK", "‘", ()),
    ("RIGHT_SINGLE_QUOTATION_MARK", "’", ()),
    ("LEFT_DOUBLE_QUOTATION_MARK", "“", ()),
    ("RIGHT_DOUBLE_QUOTATION_MARK", "”", ()),
)
