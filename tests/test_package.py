import tabparse


def test_package_root_exports_parser():
    assert tabparse.parse(b"a,b") == [["a", "b"]]
    assert tabparse.parse(b'name,city\nPaul,"Montreal, QC"\n') == [["name", "city"], ["Paul", "Montreal, QC"]]


def test_package_root_exports_errors():
    assert issubclass(tabparse.UnmatchedQuoteError, tabparse.QuoteError)
    assert issubclass(tabparse.WrongFieldCountError, tabparse.TabularParseError)
    assert set(tabparse.__all__) <= set(dir(tabparse))
