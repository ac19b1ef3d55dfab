"""Mock objects for clirest tests."""
