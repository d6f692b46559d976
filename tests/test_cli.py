"""Tests for the command-line interface."""

import pytest
from typer.testing import CliRunner

from stowaway import __version__
from stowaway.cli import app

runner = CliRunner()


def invoke(*args, **kwargs):
    return runner.invoke(app, [str(arg) for arg in args], **kwargs)


@pytest.fixture
def env(tmp_path, monkeypatch):
    """A dotfiles checkout with two packages and an empty home directory."""
    tmp_path = tmp_path.resolve()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))

    bash = tmp_path / "dotfiles" / "bash"
    bash.mkdir(parents=True)
    (bash / ".bashrc").write_text("# bashrc")

    vim = tmp_path / "dotfiles" / "vim"
    (vim / "src" / ".vim").mkdir(parents=True)
    (vim / "src" / ".vim" / "vimrc").write_text("set nu")
    (vim / "stowaway.toml").write_text('name = "editor"\n')
    hooks = vim / "hooks"
    hooks.mkdir()
    (hooks / "after_install").write_text('#!/bin/sh\necho ok > "$1/installed"\n')
    (hooks / "after_install").chmod(0o755)

    home = tmp_path / "home"
    home.mkdir()
    return tmp_path


def test_version():
    """Test that --version prints the version."""
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


class TestStowCommand:
    """Tests for the stow command."""

    def test_installs_packages(self, env):
        """Test that stow links every package into the target."""
        home = env / "home"

        result = invoke("stow", env / "dotfiles/bash", env / "dotfiles/vim", "-t", home)

        assert result.exit_code == 0, result.output
        assert (home / ".bashrc").read_text() == "# bashrc"
        assert (home / ".vim" / "vimrc").read_text() == "set nu"
        assert "editor" in result.output
        assert "Installed 2 packages" in result.output

    def test_runs_hooks(self, env):
        """Test that package hooks run during stow."""
        home = env / "home"

        result = invoke("stow", env / "dotfiles/vim", "-t", home)

        assert result.exit_code == 0, result.output
        states = list((home / ".stowaway").iterdir())
        assert len(states) == 1
        assert (states[0] / "installed").read_text() == "ok\n"

    def test_restow_picks_up_new_files(self, env):
        """Test that stowing an installed package reinstalls it."""
        home = env / "home"
        invoke("stow", env / "dotfiles/bash", "-t", home)
        (env / "dotfiles" / "bash" / ".inputrc").touch()

        result = invoke("stow", env / "dotfiles/bash", "-t", home)

        assert result.exit_code == 0, result.output
        assert (home / ".inputrc").is_symlink()

    def test_delete(self, env):
        """Test that --delete removes what stow created."""
        home = env / "home"
        invoke("stow", env / "dotfiles/bash", "-t", home)

        result = invoke("stow", "--delete", env / "dotfiles/bash", "-t", home)

        assert result.exit_code == 0, result.output
        assert not (home / ".bashrc").is_symlink()
        assert list((home / ".stowaway").iterdir()) == []
        assert "Uninstalled 1 package" in result.output

    def test_interactive_selection(self, env):
        """Test that --interactive only processes the chosen packages."""
        home = env / "home"

        result = runner.invoke(
            app,
            [
                "stow",
                "-i",
                str(env / "dotfiles/bash"),
                str(env / "dotfiles/vim"),
                "-t",
                str(home),
            ],
            input="2\n",
        )

        assert result.exit_code == 0, result.output
        assert not (home / ".bashrc").exists()
        assert (home / ".vim" / "vimrc").is_symlink()

    def test_malformed_manifest(self, env):
        """Test that a broken manifest is reported and nothing is installed."""
        home = env / "home"
        (env / "dotfiles" / "vim" / "stowaway.toml").write_text("name = ")

        result = invoke("stow", env / "dotfiles/bash", env / "dotfiles/vim", "-t", home)

        assert result.exit_code == 1
        assert "Manifest error" in result.output
        assert not (home / ".bashrc").exists()

    def test_conflicting_file(self, env):
        """Test that an occupied target path fails the run."""
        home = env / "home"
        (home / ".bashrc").write_text("mine")

        result = invoke("stow", env / "dotfiles/bash", "-t", home)

        assert result.exit_code == 1
        assert "File exists" in result.output
        assert (home / ".bashrc").read_text() == "mine"

    def test_target_from_settings(self, env):
        """Test that the settings file provides the default target."""
        home = env / "home"
        config = env / "config" / "stowaway"
        config.mkdir(parents=True)
        (config / "config.toml").write_text(f'target = "{home}"\n')

        result = runner.invoke(app, ["stow", str(env / "dotfiles/bash")])

        assert result.exit_code == 0, result.output
        assert (home / ".bashrc").is_symlink()


class TestInstallUninstallCommands:
    """Tests for the install and uninstall commands."""

    def test_install_then_uninstall(self, env):
        """Test the hook-less single package commands."""
        home = env / "home"
        package = str(env / "dotfiles/vim")

        result = runner.invoke(app, ["install", package, "-t", str(home)])
        assert result.exit_code == 0, result.output
        assert (home / ".vim" / "vimrc").is_symlink()
        states = list((home / ".stowaway").iterdir())
        assert not (states[0] / "installed").exists()

        result = runner.invoke(app, ["install", package, "-t", str(home)])
        assert result.exit_code == 0, result.output

        result = runner.invoke(app, ["uninstall", package, "-t", str(home)])
        assert result.exit_code == 0, result.output
        assert not (home / ".vim").exists()

    def test_uninstall_not_installed(self, env):
        """Test that uninstalling a package that is not installed is harmless."""
        result = runner.invoke(
            app, ["uninstall", str(env / "dotfiles/bash"), "-t", str(env / "home")]
        )

        assert result.exit_code == 0
        assert "not installed" in result.output


class TestPackagesCommand:
    """Tests for the packages command."""

    def test_lists_installed_sources(self, env):
        """Test that installed package sources are printed."""
        home = env / "home"
        invoke("install", env / "dotfiles/bash", "-t", home)

        result = runner.invoke(app, ["packages", "-t", str(home)])

        assert result.exit_code == 0
        assert result.output.splitlines() == [str(env / "dotfiles" / "bash")]

    def test_prefix_filter(self, env):
        """Test that --prefix hides packages outside it."""
        home = env / "home"
        invoke("install", env / "dotfiles/bash", "-t", home)

        result = runner.invoke(
            app, ["packages", "-t", str(home), "-p", str(env / "elsewhere")]
        )

        assert result.exit_code == 0
        assert result.output == ""
