import io

from savvyshopper.domain import Offer, Retailer
from savvyshopper.render import table


def _render(offers):
    buffer = io.StringIO()
    table(buffer, offers)
    return buffer.getvalue()


def test_table_golden():
    offers = [
        Offer("Short Title", 10.99, "https://example.com/1", Retailer.AMAZON),
        Offer(
            "Very Long Title That Should Be Truncated Because It Exceeds Sixty Characters",
            20.99,
            "https://example.com/2",
            Retailer.WALMART,
        ),
    ]
    expected_lines = [
        "Title" + " " * 57 + "Price" + " " * 3 + "Retailer" + " " * 2 + "URL",
        "Short Title" + " " * 51 + "$10.99" + " " * 2 + "Amazon" + " " * 4 + "https://example.com/1",
        "Very Long Title That Should Be Truncated Because It Exceeds "
        + " " * 2
        + "$20.99"
        + " " * 2
        + "Walmart"
        + " " * 3
        + "https://example.com/2",
    ]
    assert _render(offers).strip() == "\n".join(expected_lines)


def test_table_header_only():
    assert _render([]) == "Title  Price  Retailer  URL\n"


def test_table_titles_truncated_to_sixty():
    output = _render([Offer("x" * 80, 1.0, "https://example.com/x", Retailer.AMAZON)])
    row = output.splitlines()[1]
    assert row.startswith("x" * 60 + " ")
    assert "x" * 61 not in row


def test_table_price_has_two_decimals():
    output = _render([Offer("Widget", 5, "https://example.com/w", Retailer.WALMART)])
    assert "$5.00" in output
    assert output.endswith("https://example.com/w\n")


def test_table_rows_align():
    output = _render(
        [
            Offer("A", 1.5, "https://example.com/a", Retailer.AMAZON),
            Offer("Longer name", 123.25, "https://example.com/b", Retailer.WALMART),
        ]
    )
    lines = output.splitlines()
    assert len(lines) == 3
    assert len({line.index("https") for line in lines[1:]}) == 1
    assert len({line.find("$") for line in lines[1:]}) == 1