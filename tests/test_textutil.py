from nacos_kit.textutil import SHOW_CONTENT_SIZE, md5, truncate_content


def test_md5():
    assert md5("demo") == "fe01ce2a7fbac8fafaed7c982a04e229"


def test_md5_is_stable_and_hex():
    digest = md5("some content")
    assert digest == md5("some content")
    assert len(digest) == 32
    assert int(digest, 16) >= 0


def test_truncate_empty_and_short():
    assert truncate_content("") == ""
    assert truncate_content("short") == "short"
    exact = "x" * SHOW_CONTENT_SIZE
    assert truncate_content(exact) == exact


def test_truncate_long():
    content = "a" * 150
    result = truncate_content(content)
    assert len(result) == SHOW_CONTENT_SIZE
    assert content.startswith(result)


def test_truncate_counts_utf8_bytes():
    content = "é" * 80
    result = truncate_content(content)
    assert len(result.encode("utf-8")) <= SHOW_CONTENT_SIZE
    assert content.startswith(result)
    assert result == "é" * 50