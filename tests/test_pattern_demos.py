"""
pattern_demos tests
"""

import pattern_demos


class TestPatternDemos:
    """Demo driver"""

    def test_all_patterns_registered(self):
        assert list(pattern_demos.DEMOS) == [
            "strategy", "builder", "factory", "singleton",
            "adapter", "composite", "decorator", "facade",
        ]

    def test_run_selected(self, capsys):
        assert pattern_demos.run(["builder", "composite"]) == 2
        out = capsys.readouterr().out
        assert "ORDER BUILDER DEMONSTRATION" in out
        assert "Bundle 2 [Bundle 1 [Item 1, Item 2], Item 3]" in out

    def test_unknown_pattern_skipped(self, capsys):
        assert pattern_demos.run(["visitor", "Decorator"]) == 1
        out = capsys.readouterr().out
        assert "Unknown pattern 'visitor'" in out
        assert "Total Price: $1110.00" in out

    def test_main_reads_argv(self, capsys):
        pattern_demos.main(["strategy"])
        assert "Discounted price: $95.00" in capsys.readouterr().out

    def test_factory_singleton_adapter_demos(self, capsys):
        assert pattern_demos.run(["factory", "singleton", "adapter"]) == 3
        out = capsys.readouterr().out
        assert "Notification type 'PUSH' is not supported yet." in out
        assert "SUCCESS: Both variables point to the same instance." in out
        assert "paid by PhonePe" in out
        assert "paid by Paypal" in out

    def test_facade_demo_reports_cancellation(self, capsys):
        assert pattern_demos.run(["facade"]) == 1
        out = capsys.readouterr().out
        assert "successfully placed" in out
        assert "[Error] Order placement interrupted" in out
