"""Tests for sumocli.parse_torikumi."""

from sumocli.models import BanzukeSlot, NamedRank, NumberedRank, RikishiRecord
from sumocli.parse_torikumi import parse_record, parse_torikumi_page, roster


class TestParseRecord:
    def test_wins_and_losses(self) -> None:
        assert parse_record("（6勝2敗）") == RikishiRecord(wins=6, losses=2)
        assert parse_record("（6勝2敗）").rest is None

    def test_with_rest_days(self) -> None:
        assert parse_record("（6勝2敗3休）") == RikishiRecord(wins=6, losses=2, rest=3)

    def test_ascii_parentheses(self) -> None:
        assert parse_record("(1勝0敗)") == RikishiRecord(wins=1, losses=0)

    def test_unmatched_is_zero_zero(self) -> None:
        assert parse_record("") == RikishiRecord(wins=0, losses=0)
        assert parse_record("休場") == RikishiRecord(wins=0, losses=0)
        assert parse_record("6勝2敗") == RikishiRecord(wins=0, losses=0)


class TestParseTorikumiPage:
    """Tests for parse_torikumi_page()."""

    def test_correct_number_of_bouts(self, torikumi_day3_html: str) -> None:
        bouts = parse_torikumi_page(torikumi_day3_html, "Makuuchi")
        assert len(bouts) == 3
        assert all(b.division == "Makuuchi" for b in bouts)

    def test_shikona_extraction(self, torikumi_day3_html: str) -> None:
        bouts = parse_torikumi_page(torikumi_day3_html, "Makuuchi")
        assert (bouts[0].east.shikona, bouts[0].west.shikona) == ("獅司", "大青山")

    def test_west_win(self, torikumi_day3_html: str) -> None:
        bout = parse_torikumi_page(torikumi_day3_html, "Makuuchi")[0]
        assert bout.east.result == "L"
        assert bout.west.result == "W"
        assert bout.west.technique == "上手投げ"
        assert bout.east.technique == ""

    def test_east_win(self, torikumi_day3_html: str) -> None:
        bout = parse_torikumi_page(torikumi_day3_html, "Makuuchi")[1]
        assert bout.east.result == "W"
        assert bout.west.result == "L"
        assert bout.east.technique == "寄り切り"

    def test_undecided_bout(self, torikumi_day3_html: str) -> None:
        bout = parse_torikumi_page(torikumi_day3_html, "Makuuchi")[2]
        assert bout.east.result == ""
        assert bout.west.result == ""
        assert bout.east.technique == ""

    def test_ranks_placed_on_banzuke(self, torikumi_day3_html: str) -> None:
        bout = parse_torikumi_page(torikumi_day3_html, "Makuuchi")[0]
        assert bout.east.slot == BanzukeSlot("Makuuchi", NumberedRank(18), "East")
        # Juryo visitor on a Makuuchi card keeps its own division
        assert bout.west.slot == BanzukeSlot("Juryo", NumberedRank(1), "West")

    def test_records(self, torikumi_day3_html: str) -> None:
        bouts = parse_torikumi_page(torikumi_day3_html, "Makuuchi")
        assert bouts[0].west.record == RikishiRecord(wins=3, losses=0)
        assert bouts[1].west.record == RikishiRecord(wins=0, losses=2, rest=1)

    def test_missing_table_returns_empty(self, torikumi_no_table_html: str) -> None:
        assert parse_torikumi_page(torikumi_no_table_html, "Juryo") == []

    def test_row_without_shikona_skipped(self) -> None:
        html = """
        <table id="torikumi_table">
          <tr><th>東</th><th>決まり手</th><th>西</th></tr>
          <tr>
            <td class="player"><span class="rank">横綱</span></td>
            <td class="decide"></td>
            <td class="player"><span class="rank">大関</span>
              <span class="name"><a><span>琴櫻</span></a></span></td>
          </tr>
        </table>
        """
        assert parse_torikumi_page(html, "Makuuchi") == []


class TestRoster:
    def test_banzuke_order(self, torikumi_day3_html: str) -> None:
        bouts = parse_torikumi_page(torikumi_day3_html, "Makuuchi")
        names = [r.shikona for r in roster(bouts)]
        assert names == ["豊昇龍", "琴櫻", "高安", "若元春", "獅司", "大青山"]

    def test_yokozuna_slot(self, torikumi_day3_html: str) -> None:
        first = roster(parse_torikumi_page(torikumi_day3_html, "Makuuchi"))[0]
        assert first.slot == BanzukeSlot("Makuuchi", NamedRank("Yokozuna"), "East")

    def test_empty(self) -> None:
        assert roster([]) == []
