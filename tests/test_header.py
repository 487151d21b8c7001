import io
import unittest
from contextlib import redirect_stderr
from pathlib import Path

from h2cs import header, vectors


DATA = Path(__file__).resolve().parent / "data"


def _extract(text: str):
    return header.extract(text.splitlines(keepends=True))


class TestExtract(unittest.TestCase):
    def test_device_header(self):
        with open(DATA / "stm32xx.h") as f:
            table, max_irqn = header.extract(f)

        self.assertEqual(max_irqn, 37)
        self.assertEqual(len(table), 13)
        self.assertEqual(table.name(-14), "NonMaskableInt_")
        self.assertEqual(table.name(-13), "HardFault_")
        self.assertEqual(table.name(-1), "SysTick_")
        self.assertEqual(table.name(0), "WWDG_IRQ")
        self.assertEqual(table.name(37), "USART1_IRQ")
        self.assertIsNone(table.name(2))
        self.assertIsNone(table.name(-3))

    def test_no_enumeration(self):
        table, max_irqn = _extract("#define FOO 1\nint x = 3;\n}\n")
        self.assertEqual(len(table), 0)
        self.assertEqual(max_irqn, vectors.NO_IRQN)

    def test_lines_before_marker_are_ignored(self):
        table, max_irqn = _extract(
            "  EARLY = 3,\n"
            "  WWDG_IRQn = 0,\n"
            "  LATE = 5,\n"
            "};\n"
        )
        self.assertNotIn(3, table)
        self.assertEqual(table.name(0), "WWDG_IRQ")
        self.assertEqual(table.name(5), "LAT")
        self.assertEqual(max_irqn, 5)

    def test_marker_line_is_parsed(self):
        table, _ = _extract("  TIM2_IRQn = 28, /* first entry */\n}\n")
        self.assertEqual(table.name(28), "TIM2_IRQ")

    def test_closing_brace_ends_extraction(self):
        table, max_irqn = _extract(
            "  TIM2_IRQn = 28,\n"
            "} IRQn_Type;\n"
            "  USART1_IRQn = 37,\n"
        )
        self.assertNotIn(37, table)
        self.assertEqual(max_irqn, 28)

    def test_matching_line_with_brace_does_not_end_extraction(self):
        table, _ = _extract(
            "  TIM2_IRQn = 28, /* } */\n"
            "  USART1_IRQn = 37,\n"
            "}\n"
        )
        self.assertEqual(table.name(37), "USART1_IRQ")

    def test_whitespace_tolerance(self):
        table, _ = _extract(
            "\tTIM2_IRQn\t=\t28,\n"
            "  TIM3_IRQn =29\n"
            "  TIM4_IRQn= 30,\n"
            "}\n"
        )
        self.assertEqual(table.name(28), "TIM2_IRQ")
        self.assertEqual(table.name(29), "TIM3_IRQ")
        self.assertNotIn(30, table)

    def test_duplicates_overwrite(self):
        table, _ = _extract(
            "  TIM2_IRQn = 28,\n"
            "  TIM2_TIM9_IRQn = 28,\n"
            "}\n"
        )
        self.assertEqual(table.name(28), "TIM2_TIM9_IRQ")

    def test_values_beyond_nvic_are_skipped(self):
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            table, max_irqn = _extract(
                "  Foo_IRQn = 600,\n"
                "  TIM2_IRQn = 28,\n"
                "}\n"
            )
        self.assertEqual(len(table), 1)
        self.assertEqual(max_irqn, 28)
        self.assertEqual(stderr.getvalue(), "")

    def test_brace_ends_extraction_on_value_beyond_nvic(self):
        table, max_irqn = _extract(
            "  TIM2_IRQn = 28,\n"
            "  LAST_IRQn = 600 } IRQn_Type;\n"
            "  volatile_reg = 45,\n"
        )
        self.assertNotIn(45, table)
        self.assertEqual(list(table.items()), [(28, "TIM2_IRQ")])
        self.assertEqual(max_irqn, 28)

    def test_values_below_core_are_reported(self):
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            table, max_irqn = _extract(
                "  Reset_IRQn = -15,\n"
                "  Foo_IRQn = -20,\n"
                "  TIM2_IRQn = 28,\n"
                "}\n"
            )
        self.assertEqual(list(table.items()), [(28, "TIM2_IRQ")])
        self.assertEqual(max_irqn, 28)
        self.assertIn("Reset_IRQn = -15,", stderr.getvalue())
        self.assertIn("Foo_IRQn = -20,", stderr.getvalue())
        self.assertIn("[WARNING]", stderr.getvalue())

    def test_short_token_leaves_slot_unnamed(self):
        table, max_irqn = _extract(
            "  TIM2_IRQn = 28,\n"
            "  n = 28,\n"
            "  Bus = -11,\n"
            "}\n"
        )
        self.assertNotIn(28, table)
        self.assertNotIn(-11, table)
        self.assertEqual(max_irqn, 28)


class TestRead(unittest.TestCase):
    def test_read(self):
        table, max_irqn = header.read(str(DATA / "stm32xx.h"))
        self.assertEqual(max_irqn, 37)
        self.assertEqual(table.name(28), "TIM2_IRQ")

    def test_missing_file(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as cm:
                header.read(str(DATA / "missing.h"))
        self.assertEqual(cm.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
