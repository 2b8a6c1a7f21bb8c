from kukai.core.comments import bucket_comments, format_comments, order_labels
from kukai.core.models import Comment, ResultRow, VotingRule

RULES = [VotingRule("特選", 2, 1), VotingRule("入選", 1, 2)]


def row_with(*comments):
    return ResultRow(entry_no=1, body="古池や", score=0, comments=tuple(comments))


def test_order_by_points_then_label():
    rules = [VotingRule("A", 0), VotingRule("B", -1), VotingRule("C", 2)]
    assert order_labels(["A", "B", "C"], rules) == ["C", "A", "B"]


def test_unknown_labels_rank_as_zero_points():
    rules = [VotingRule("B", 1), VotingRule("D", -1)]
    assert order_labels(["D", "Z", "B", "A"], rules) == ["B", "A", "Z", "D"]


def test_format_comments_blocks():
    row = row_with(
        Comment("乙", "水の音がよい", "入選"),
        Comment("甲", "古池の静けさ", "特選"),
        Comment("丙", None, "入選"),
    )
    assert format_comments(row, RULES) == (
        "【特選】\n"
        "古池の静けさ　　　――甲\n"
        "\n"
        "【入選】\n"
        "水の音がよい　　　――乙\n"
        "　　　――丙"
    )


def test_placeholders_for_missing_voter_and_category():
    row = row_with(Comment(None, "よい", None))
    assert format_comments(row, RULES) == "【カテゴリ不明】\nよい　　　――（俳号未設定）"


def test_bucket_keeps_insertion_order():
    row = row_with(Comment("C", "3", "入選"), Comment("A", "1", "入選"), Comment("B", "2", "入選"))
    assert bucket_comments(row) == {"入選": [("C", "3"), ("A", "1"), ("B", "2")]}


def test_no_comments_is_empty_string():
    assert format_comments(row_with(), RULES) == ""


def test_tied_labels_use_japanese_collation():
    assert order_labels(["入選", "特選"], []) == ["特選", "入選"]
    assert order_labels(["い", "ア"], []) == ["ア", "い"]


def test_collation_only_breaks_point_ties():
    rules = [VotingRule("入選", 3), VotingRule("特選", 1)]
    assert order_labels(["特選", "入選"], rules) == ["入選", "特選"]
