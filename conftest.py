"""Register plugins for the whole test run."""

pytest_plugins = ["git_fixture.plugin", "pytester"]
