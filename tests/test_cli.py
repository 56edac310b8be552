"""End-to-end tests: write images with Pillow, run the png2cfr entry point."""

import json
from pathlib import Path

import pytest
from PIL import Image

from png2cfr.__main__ import main
from png2cfr.core.compress import expand


@pytest.fixture(autouse=True)
def isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ('PNG2CFR_JOBS', 'PNG2CFR_HIGHLIGHT', 'NO_COLOR'):
        monkeypatch.delenv(key, raising=False)
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)


def _png(tmp_path: Path, size: tuple[int, int], colour, mode: str = 'RGB', name: str = 'img.png') -> str:
    path = tmp_path / name
    Image.new(mode, size, colour).save(path)
    return str(path)


class TestUsage:
    def test_no_arguments(self, capsys) -> None:
        main([])
        out = capsys.readouterr().out
        assert out.startswith('usage: png2cfr')

    def test_extra_arguments(self, tmp_path: Path, capsys) -> None:
        path = _png(tmp_path, (1, 1), (255, 255, 255))
        main([path, path])
        assert 'usage: png2cfr' in capsys.readouterr().out

    def test_unknown_option(self, tmp_path: Path, capsys) -> None:
        path = _png(tmp_path, (1, 1), (255, 255, 255))
        main([path, '--bogus'])
        captured = capsys.readouterr()
        assert captured.out.startswith('usage: png2cfr')
        assert '--bogus' in captured.err

    def test_non_integer_jobs(self, tmp_path: Path, capsys) -> None:
        path = _png(tmp_path, (1, 1), (255, 255, 255))
        main([path, '--jobs', 'x'])
        captured = capsys.readouterr()
        assert captured.out.startswith('usage: png2cfr')
        assert 'F\n' not in captured.out


class TestErrors:
    def test_missing_file(self, tmp_path: Path, capsys) -> None:
        main([str(tmp_path / 'missing.png')])
        captured = capsys.readouterr()
        assert captured.out == ''
        assert 'Error opening file' in captured.err

    def test_not_an_image(self, tmp_path: Path, capsys) -> None:
        bogus = tmp_path / 'bogus.png'
        bogus.write_text('definitely not a png')
        main([str(bogus)])
        captured = capsys.readouterr()
        assert captured.out == ''
        assert 'Error decoding image' in captured.err

    def test_unknown_variant(self, tmp_path: Path, capsys) -> None:
        path = _png(tmp_path, (1, 1), (255, 255, 255))
        main([path, '--variant', 'zigzag'])
        captured = capsys.readouterr()
        assert captured.out == ''
        assert 'Unknown variant: zigzag' in captured.err


class TestEncode:
    def test_single_white_pixel(self, tmp_path: Path, capsys) -> None:
        main([_png(tmp_path, (1, 1), (255, 255, 255))])
        assert capsys.readouterr().out == 'F\n'

    def test_alpha_ignored(self, tmp_path: Path, capsys) -> None:
        main([_png(tmp_path, (1, 1), (255, 255, 255, 0), mode='RGBA')])
        assert capsys.readouterr().out == 'F\n'

    def test_palette_image(self, tmp_path: Path, capsys) -> None:
        main([_png(tmp_path, (1, 1), 0, mode='P')])
        # Palette index 0 of a fresh P image is black
        assert capsys.readouterr().out == 'CF\n'

    def test_fixed_variant_expanded(self, tmp_path: Path, capsys) -> None:
        main([_png(tmp_path, (2, 2), (255, 255, 255)), '--variant', 'rows-ltr', '--expand'])
        assert capsys.readouterr().out == 'RRFFRRFRRF\n'

    def test_output_expands_to_a_full_scan(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / 'grad.png'
        img = Image.new('RGB', (5, 4))
        img.putdata([((x * 60) % 256, (y * 90) % 256, 128) for y in range(4) for x in range(5)])
        img.save(path)
        main([str(path)])
        out = capsys.readouterr().out.strip()
        assert expand(out).count('F') == 20

    def test_jobs_flag(self, tmp_path: Path, capsys) -> None:
        path = _png(tmp_path, (3, 3), (255, 0, 0))
        main([path])
        serial = capsys.readouterr().out
        main([path, '--jobs', '2'])
        assert capsys.readouterr().out == serial

    def test_verbose_lists_variants(self, tmp_path: Path, capsys) -> None:
        main([_png(tmp_path, (2, 2), (0, 0, 255)), '--verbose'])
        err = capsys.readouterr().err
        assert err.count('png2cfr: #') == 8

    def test_no_highlight_when_piped(self, tmp_path: Path, capsys) -> None:
        main([_png(tmp_path, (4, 4), (0, 255, 0)), '--highlight', '1'])
        assert '\033[' not in capsys.readouterr().out


class TestOutputModes:
    def test_json(self, tmp_path: Path, capsys) -> None:
        main([_png(tmp_path, (1, 1), (255, 255, 255)), '--json'])
        obj = json.loads(capsys.readouterr().out)
        assert obj['dimensions'] == {'width': 1, 'height': 1}
        assert obj['best']['index'] == 0
        assert obj['best']['commands'] == 'F'

    def test_json_all(self, tmp_path: Path, capsys) -> None:
        main([_png(tmp_path, (1, 1), (255, 255, 255)), '--json', '--all'])
        obj = json.loads(capsys.readouterr().out)
        assert [v['commands'] for v in obj['variants']] == ['F', 'F', 'RRF', 'RRF', '[RR]F', '[RR]F', '[RRR]F', '[RRR]F']

    def test_all_text(self, tmp_path: Path, capsys) -> None:
        main([_png(tmp_path, (1, 1), (255, 255, 255)), '--all'])
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 10
        assert lines[2].startswith('* #0')

    def test_env_file_loaded(self, tmp_path: Path, capsys) -> None:
        (tmp_path / '.env').write_text('PNG2CFR_JOBS=2\n')
        main([_png(tmp_path, (1, 1), (255, 255, 255))])
        captured = capsys.readouterr()
        assert captured.out == 'F\n'
        assert 'loaded' in captured.err
