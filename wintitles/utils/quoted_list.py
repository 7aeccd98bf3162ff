""" osascript 列表输出解析器 """

_QUOTE = '"'
_BACKSLASH = "\\"
_ESCAPED_QUOTE = _BACKSLASH + _QUOTE


def split_titles(raw: str) -> list[str]:
    """
    从 osascript -ss 的列表输出里按顺序取出所有双引号字符串
    例：
        split_titles('{{}, {"0"}, {"1", "2"}}')  ->  ["0", "1", "2"]

    - 引号外的花括号、逗号、空白一律忽略
    - 前一个字符是反斜杠的引号不算结束，解码时 \\" 还原成 "
    - 没闭合的最后一段直接丢弃，不抛异常
    """
    titles: list[str] = []
    chars: list[str] = []
    inside = False

    for c in raw:
        if not inside:
            if c == _QUOTE:
                inside = True
                chars = []
            continue

        # 只看原始缓冲区的最后一个字符
        if c == _QUOTE and (not chars or chars[-1] != _BACKSLASH):
            titles.append("".join(chars).replace(_ESCAPED_QUOTE, _QUOTE))
            inside = False
            continue
        chars.append(c)

    return titles
