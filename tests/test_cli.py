"""Tests for the cms-decode CLI and command discovery."""

import json
from pathlib import Path

import pytest
from cms_decode.__main__ import main
from cms_decode.core.profile import DEFAULT_CMYK_PROFILE
from cms_decode.registry import discover, get


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    # keep .env discovery inside tmp_path
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv('CMS_PROFILE_DIRS', '')
    monkeypatch.delenv('CMS_PROFILE_DIRS')


class TestRegistry:
    def test_discovers_commands(self) -> None:
        assert {'default', 'profile', 'show'} <= set(discover())

    def test_unknown_command(self) -> None:
        with pytest.raises(KeyError, match='Unknown command'):
            get('nope')


class TestShow:
    def test_enabled_text(self, tmp_path: Path, write_profile, capsys) -> None:
        write_profile('CMYK', name='in.icc')
        config = tmp_path / 'decode.json'
        config.write_text(json.dumps({'profiles': {'input_cmyk': 'in.icc'}, 'rendering_intent': 'saturation'}))
        assert main(['show', str(config)]) == 0
        out = capsys.readouterr().out
        assert 'color management: enabled' in out
        assert 'SATURATION' in out
        assert 'output_rgb' in out and '(none)' in out

    def test_disabled_json_is_null(self, tmp_path: Path, write_profile, capsys) -> None:
        write_profile('CMYK', name='in.icc')
        config = tmp_path / 'decode.json'
        config.write_text(json.dumps({'enabled': False, 'profiles': {'input_cmyk': 'in.icc'}}))
        assert main(['show', str(config), '--json']) == 0
        captured = capsys.readouterr()
        assert json.loads(captured.out) is None
        assert 'released 1 profile' in captured.err

    def test_mismatch_is_error(self, tmp_path: Path, write_profile, capsys) -> None:
        write_profile('RGB ', name='rgb.icc')
        config = tmp_path / 'decode.json'
        config.write_text(json.dumps({'profiles': {'input_cmyk': 'rgb.icc'}}))
        assert main(['show', str(config)]) == 1
        assert 'Error:' in capsys.readouterr().err

    def test_missing_file(self, tmp_path: Path, capsys) -> None:
        assert main(['show', str(tmp_path / 'missing.json')]) == 1


class TestProfile:
    def test_describes_profiles(self, write_profile, capsys) -> None:
        path = write_profile('GRAY', name='gray.icc')
        assert main(['profile', str(path), '--json']) == 0
        info = json.loads(capsys.readouterr().out)
        assert info[0]['color_space'] == 'GRAY'
        assert info[0]['source'] == str(path)

    def test_bad_profile_exit_code(self, tmp_path: Path, capsys) -> None:
        bad = tmp_path / 'bad.icc'
        bad.write_bytes(b'junk')
        assert main(['profile', str(bad)]) == 1


class TestDefault:
    def test_found_in_second_dir(self, tmp_path: Path, write_profile, capsys) -> None:
        (tmp_path / 'a').mkdir()
        write_profile('CMYK', name=DEFAULT_CMYK_PROFILE, directory=tmp_path / 'b')
        assert main(['default', str(tmp_path / 'a'), str(tmp_path / 'b')]) == 0
        assert 'CMYK' in capsys.readouterr().out

    def test_from_env_file(self, tmp_path: Path, write_profile, capsys) -> None:
        write_profile('CMYK', name=DEFAULT_CMYK_PROFILE, directory=tmp_path / 'icc')
        env_file = tmp_path / 'custom.env'
        env_file.write_text(f'CMS_PROFILE_DIRS={tmp_path / "icc"}\n')
        assert main(['--env-file', str(env_file), 'default', '--json']) == 0
        assert json.loads(capsys.readouterr().out)[0]['color_space'] == 'CMYK'

    def test_not_found(self, capsys) -> None:
        assert main(['default']) == 1
        assert 'no usable' in capsys.readouterr().err


class TestHelp:
    def test_lists_commands(self, capsys) -> None:
        assert main(['help']) == 0
        assert 'show' in capsys.readouterr().out

    def test_command_docs(self, capsys) -> None:
        assert main(['help', 'default']) == 0
        assert 'CMS_PROFILE_DIRS' in capsys.readouterr().out

    def test_unknown_topic(self) -> None:
        assert main(['help', 'nope']) == 1
