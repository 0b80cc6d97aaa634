import io
import unittest
from datetime import datetime, timezone
from unittest.mock import patch
from rich.console import Console
from say.exceptions import InvalidJustificationError
from say.say import Say

SAMPLE = datetime(2023, 6, 3, 1, 45, 11, tzinfo=timezone.utc)
RULE = "=" * 80

class SayTestCase(unittest.TestCase):
    config = {"columns": 80, "justify": "left", "time_format": "web_service", "max_logs": 100}

    def setUp(self):
        self.output = io.StringIO()
        self.say = Say(config=dict(self.config), console=Console(file=self.output, width=200))

    def lines(self):
        return self.output.getvalue().split("\n")

class TestSayLines(SayTestCase):
    def test_line(self):
        self.assertEqual(self.say.line(), " ...")
        self.assertEqual(self.say.line("TEST"), " -> TEST")
        self.assertEqual(self.say.line("TEST", type="info"), " -- TEST")
        self.assertEqual(self.lines(), [" ...", " -> TEST", " -- TEST", ""])

    def test_long_line_is_written_whole(self):
        expected = " -> " + "T" * 90
        self.assertEqual(self.say.line("T" * 90), expected)
        self.assertEqual(self.lines(), [expected, ""])

    def test_call_without_callable(self):
        self.assertEqual(self.say.call(), " ...")
        self.assertEqual(self.say("TEST"), " -> TEST")
        self.assertEqual(self.say("TEST", "error"), " ** TEST")

    def test_type_shortcuts(self):
        self.assertEqual(self.say.debug("TEST"), " >> TEST")
        self.assertEqual(self.say.error("TEST"), " ** TEST")
        self.assertEqual(self.say.info("TEST"), " -- TEST")
        self.assertEqual(self.say.success("TEST"), " -> TEST")
        self.assertEqual(self.say.warn("TEST"), " !¡ TEST")

    def test_write(self):
        self.assertEqual(self.say.write("TEST"), "TEST")
        self.assertEqual(self.say.write("A", "B"), "A\nB")
        self.assertEqual(self.output.getvalue(), "TEST\nA\nB\n")

    def test_written_lines_match_returned_strings(self):
        self.assertEqual(self.say.line("x\x08y"), " -> x\x08y")
        self.assertEqual(self.say.write("a\tb"), "a\tb")
        self.assertEqual(self.output.getvalue(), " -> x\x08y\na\tb\n")

    def test_clear_esc(self):
        self.assertIs(self.say.clear_esc(), self.say)
        self.assertIn("\x1b[2K\r", self.output.getvalue())

class TestSayBanners(SayTestCase):
    def test_banner(self):
        self.assertEqual(self.say.banner(), RULE)
        self.assertEqual(self.say.banner(""), "=  " + "=" * 77)
        self.assertEqual(self.say.banner("TEST"), "= TEST " + "=" * 73)
        self.assertEqual(self.say.banner("T" * 90), "= " + "T" * 90 + " =")

    def test_banner_options(self):
        self.assertEqual(self.say.banner("TEST", columns=20, justify="center"), "======= TEST =======")
        self.assertEqual(self.say.banner("TEST", columns=20, justify="right"), "============= TEST =")

    def test_banner_invalid_justify(self):
        with self.assertRaises(InvalidJustificationError):
            self.say.banner("TEST", justify="diagonal")
        self.assertEqual(self.output.getvalue(), "")

    def test_config_columns_and_justify(self):
        speaker = Say(config={"columns": 20, "justify": "center"}, console=Console(file=io.StringIO(), width=200))
        self.assertEqual(speaker.banner("TEST"), "======= TEST =======")

    def test_header(self):
        self.assertEqual(self.say.header(), RULE)
        self.assertEqual(self.say.header("TEST"), "= TEST " + "=" * 73)
        self.assertEqual(self.lines(), [RULE, "= TEST " + "=" * 73, ""])

    def test_footer(self):
        self.assertEqual(self.say.footer(), "= Done " + "=" * 73)
        self.assertEqual(self.lines(), ["= Done " + "=" * 73, "", ""])

    def test_section(self):
        expected = [RULE, "= TEST " + "=" * 73, RULE]
        self.assertEqual(self.say.section("TEST"), expected)
        self.assertEqual(self.lines(), expected + ["", ""])

    def test_section_without_text(self):
        self.assertEqual(self.say.section(), [RULE, RULE, RULE])

    def test_section_matches_long_banner_width(self):
        rule = "=" * 94
        self.assertEqual(self.say.section("T" * 90), [rule, "= " + "T" * 90 + " =", rule])

    def test_hr(self):
        self.assertEqual(self.say.hr(), "-" * 80)
        self.assertEqual(self.output.getvalue(), "\n" + "-" * 80 + "\n\n")

    def test_hr_custom_template(self):
        self.assertEqual(self.say.hr("*", template="[%s]", columns=10), "[********]")
        self.assertEqual(self.say.hr("=", template="%s\n", columns=10), "=" * 10)

class TestSayBlocks(SayTestCase):
    def test_with_block(self):
        with patch("say.say.time") as mock_time:
            mock_time.perf_counter.side_effect = [10.0, 10.5]
            result = self.say.with_block(lambda: "TEST_RESULT")
        self.assertEqual(result, "TEST_RESULT")
        self.assertEqual(self.lines(), [RULE, "= Done (0.5000s) " + "=" * 63, "", ""])

    def test_with_block_messages(self):
        with patch("say.say.time") as mock_time:
            mock_time.perf_counter.side_effect = [0.0, 0.0]
            self.say.with_block(lambda: None, header="TEST_HEADER", footer="TEST_FOOTER")
        self.assertEqual(self.lines()[0], "= TEST_HEADER " + "=" * 66)
        self.assertEqual(self.lines()[1], "= TEST_FOOTER (0.0000s) " + "=" * 56)

    def test_with_block_requires_callable(self):
        with self.assertRaises(TypeError):
            self.say.with_block()
        with self.assertRaises(TypeError):
            self.say.with_block("not callable")

    def test_call_with_callable(self):
        def work():
            self.say.info("working")
            return 42
        self.assertEqual(self.say.call("JOB", fn=work), 42)
        lines = self.lines()
        self.assertEqual(lines[0], "= JOB " + "=" * 74)
        self.assertEqual(lines[1], " -- working")
        self.assertTrue(lines[2].startswith("= Done ("))

class TestSayProgress(SayTestCase):
    def test_progress_line(self):
        with patch("say.utils.timestamps.now", return_value=SAMPLE):
            self.assertEqual(self.say.progress_line(), "[20230603014511]  ...")
            self.assertEqual(self.say.progress_line(index=9), "[20230603014511]  ... (i=9)")
            self.assertEqual(self.say.progress_line("TEST", index=9), "[20230603014511]  -- TEST (i=9)")
            self.assertEqual(self.say.progress_line("TEST", "success", index=9), "[20230603014511]  -> TEST (i=9)")

    def test_progress_line_time_format(self):
        speaker = Say(config={"time_format": "long"}, console=Console(file=io.StringIO(), width=200))
        with patch("say.utils.timestamps.now", return_value=SAMPLE):
            self.assertEqual(speaker.progress_line("TEST"), "[06/03/2023 01:45:11 UTC]  -- TEST")

    def test_progress(self):
        def work(interval):
            for _ in range(4):
                interval.update().say("step")
            return "DONE"

        with patch("say.utils.timestamps.now", return_value=SAMPLE):
            result = self.say.progress("Working", fn=work, interval=2)
        self.assertEqual(result, "DONE")
        lines = self.lines()
        self.assertTrue(lines[0].startswith("= [20230603014511] Working (i=0) ="))
        self.assertEqual(lines[1:3], ["[20230603014511]  -> step (i=2)", "[20230603014511]  -> step (i=4)"])
        self.assertTrue(lines[3].startswith("= Done ("))

    def test_progress_without_callable(self):
        with patch("say.utils.timestamps.now", return_value=SAMPLE):
            self.assertIsNone(self.say.progress())
        self.assertTrue(self.lines()[0].startswith("= [20230603014511] Start (i=0) ="))

if __name__ == "__main__":
    unittest.main()
