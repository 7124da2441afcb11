"""Tests for the demonstration run."""

from decimal import Decimal

import pytest

from bank_accounts.demo import main, run_demo

EXPECTED_OUTPUT = """\
Account Details for Savings Account (ID: S123):
   Holder: John Doe
   Balance: $1000.00
   Interest Rate: 2.00%
Account Details for Current Account (ID: C456):
   Holder: Jane Doe
   Balance: $2000.00
   Overdraft Limit: $500.00
Account Details for Savings Account (ID: S123):
   Holder: John Doe
   Balance: $1500.00
   Interest Rate: 2.00%
Account Details for Current Account (ID: C456):
   Holder: Jane Doe
   Balance: $1000.00
   Overdraft Limit: $500.00
Account Details for Savings Account (ID: S123):
   Holder: John Doe
   Balance: $1200.00
   Interest Rate: 2.00%
Account Details for Current Account (ID: C456):
   Holder: Jane Doe
   Balance: $1300.00
   Overdraft Limit: $500.00
"""


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LOG_LEVEL", "LOG_FORMAT", "SEED", "FAKER_LOCALE"):
        monkeypatch.delenv(name, raising=False)


class TestRunDemo:
    """Tests for run_demo."""

    def test_final_balances(self, capsys: pytest.CaptureFixture[str]) -> None:
        savings, current = run_demo()

        assert savings.balance == Decimal("1200")
        assert current.balance == Decimal("1300")

    def test_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        run_demo()

        assert capsys.readouterr().out == EXPECTED_OUTPUT


class TestMain:
    """Tests for the main entry point."""

    def test_exit_code_and_output(self, clean_env: None, capsys: pytest.CaptureFixture[str]) -> None:
        assert main() == 0

        captured = capsys.readouterr()
        assert captured.out == EXPECTED_OUTPUT

    def test_logs_go_to_stderr(
        self,
        clean_env: None,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("LOG_LEVEL", "INFO")

        main()

        captured = capsys.readouterr()
        assert captured.out == EXPECTED_OUTPUT
        assert "Transferred 300 from S123 to C456" in captured.err
