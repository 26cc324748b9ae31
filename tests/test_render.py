from datetime import datetime, timedelta, timezone
import io

from colorama import Fore

from todocli.render import format_timestamp, print_table, render_table
from todocli.utils import display_width, strip_ansi


class TestFormatTimestamp:
    def test_utc(self):
        dt = datetime(2006, 1, 2, 15, 4, tzinfo=timezone.utc)
        assert format_timestamp(dt) == "02 Jan 06 15:04 UTC"

    def test_numeric_offset_without_zone_name(self):
        dt = datetime(2006, 1, 2, 15, 4, tzinfo=timezone(timedelta(hours=-7)))
        assert format_timestamp(dt) == "02 Jan 06 15:04 -0700"

    def test_named_zone(self):
        dt = datetime(2006, 1, 2, 15, 4, tzinfo=timezone(timedelta(hours=-7), "MST"))
        assert format_timestamp(dt) == "02 Jan 06 15:04 MST"

    def test_absent(self):
        assert format_timestamp(None) == ""


class TestRenderTable:
    def test_empty_list(self, tasks):
        out = render_table(tasks, color=False)
        lines = out.splitlines()
        assert "TASK" in lines[1]
        assert "You have 0 pending Tasks" in out
        # top, header, footer rule, footer, bottom
        assert len(lines) == 5

    def test_rows_and_footer(self, tasks):
        tasks.add("buy milk")
        tasks.add("pay bills")
        tasks.complete(1)
        out = render_table(tasks, color=False)
        assert "\x1b[" not in out
        assert "✅ buy milk" in out
        assert "yes" in out
        assert "You have 1 pending Tasks" in out

        lines = out.splitlines()
        first_row = next(line for line in lines if "buy milk" in line)
        second_row = next(line for line in lines if "pay bills" in line)
        assert first_row.startswith("║ 1 ")
        assert second_row.startswith("║ 2 ")
        assert "│ no " in second_row
        # Completion column is filled for the done task only
        assert second_row.rstrip("║").split("│")[-1].strip() == ""
        assert first_row.rstrip("║").split("│")[-1].strip() != ""

    def test_lines_have_equal_width(self, tasks):
        tasks.add("a rather long task description")
        tasks.add("short")
        tasks.complete(2)
        out = render_table(tasks, color=True)
        widths = {display_width(line) for line in out.splitlines()}
        assert len(widths) == 1

    def test_colors(self, tasks):
        tasks.add("pending one")
        tasks.add("done one")
        tasks.complete(2)
        out = render_table(tasks, color=True)
        assert Fore.BLUE + "pending one" in out
        assert Fore.GREEN + "✅ done one" in out
        assert Fore.RED + "You have 1 pending Tasks" in out
        assert "pending one" in strip_ansi(out)

    def test_print_table_writes_stream(self, tasks):
        tasks.add("x")
        buf = io.StringIO()
        print_table(tasks, stream=buf, color=False)
        assert buf.getvalue().endswith("╝\n")


class TestDisplayWidth:
    def test_ansi_ignored(self):
        assert display_width(Fore.RED + "abc" + Fore.RESET) == 3

    def test_wide_characters(self):
        assert display_width("✅ x") == 4
