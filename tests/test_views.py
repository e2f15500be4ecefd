"""Tests for the console view."""

from user_crud.users import User
from user_crud.views import ConsoleView, format_user


class TestConsoleView:
    """Tests for ConsoleView."""

    def test_format_user(self):
        """Test the field-delimited user line."""
        user = User(id=4, name="Ana", email="ana@example.com")

        assert format_user(user) == "ID: 4 | Name: Ana | Email: ana@example.com"

    def test_display_users_empty(self, console_view, output):
        """Test the empty-state message."""
        console_view.display_users([])

        assert output() == "\n=== User List ===\nNo users registered.\n"

    def test_display_users(self, console_view, output):
        """Test one line per user under the list header."""
        console_view.display_users(
            [
                User(id=1, name="Ana", email="ana@example.com"),
                User(id=2, name="Bia", email="bia@example.com"),
            ]
        )

        assert output() == (
            "\n=== User List ===\n"
            "ID: 1 | Name: Ana | Email: ana@example.com\n"
            "ID: 2 | Name: Bia | Email: bia@example.com\n"
        )

    def test_display_user(self, console_view, output):
        """Test a single user under its header."""
        console_view.display_user(User(id=9, name="Ana", email="ana@example.com"))

        assert output() == "\n=== User ===\nID: 9 | Name: Ana | Email: ana@example.com\n"

    def test_display_success(self, console_view, output):
        """Test the success marker."""
        console_view.display_success("done")

        assert output() == "\n✓ done\n"

    def test_display_error(self, console_view, output):
        """Test the error marker."""
        console_view.display_error("broken")

        assert output() == "\n✗ Error: broken\n"

    def test_text_is_printed_literally(self, console_view, output):
        """Test markup-like and emoji-like user text is not interpreted."""
        console_view.display_user(User(id=1, name="[bold]x[/bold] :smile:", email="a@b"))

        assert "Name: [bold]x[/bold] :smile: |" in output()

    def test_long_lines_are_not_wrapped(self, console, console_view, output):
        """Test lines longer than the console width stay on one line."""
        name = "N" * (console.width + 20)
        console_view.display_user(User(id=1, name=name, email="a@b"))

        assert f"ID: 1 | Name: {name} | Email: a@b\n" in output()

    def test_default_console(self):
        """Test a console is created when none is given."""
        assert ConsoleView().console is not None
