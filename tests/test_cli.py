"""Tests for the command line interface."""

import pytest
from conftest import FakeCatalog

from foodfetch import cli
from foodfetch.config import Settings
from foodfetch.models.display import InfoLevel
from foodfetch.services.corpus import OfflineCorpus


class ClosableCatalog(FakeCatalog):
    closed = False

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_service(monkeypatch, carbonara, corpus):
    service = ClosableCatalog(meals={"carbonara": [carbonara]})
    monkeypatch.setattr(cli, "MealDBService", lambda **kwargs: service)
    monkeypatch.setattr(cli, "load_corpus", lambda path: corpus)
    return service


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = cli.build_parser().parse_args([])
        assert args.keyword is None
        assert args.infos is None

    def test_repeated_infos(self):
        args = cli.build_parser().parse_args(["pie", "-i", "links", "--infos", "instructions"])
        assert args.keyword == "pie"
        assert InfoLevel.from_names(args.infos) == InfoLevel.LINKS | InfoLevel.INSTRUCTIONS

    def test_rejects_unknown_info(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["-i", "reduced"])


class TestFetch:
    """Tests for the fetch command."""

    @pytest.mark.asyncio
    async def test_prints_report(self, fake_service, capsys):
        code = await cli.fetch("carbonara", InfoLevel.LINKS, Settings())
        out = capsys.readouterr()
        assert code == 0
        assert "Spaghetti Carbonara" in out.out
        assert "Did you mean" not in out.err
        assert fake_service.closed

    @pytest.mark.asyncio
    async def test_advisory_goes_to_stderr(self, fake_service, capsys):
        await cli.fetch("spagheti carbonara", InfoLevel.LINKS, Settings())
        out = capsys.readouterr()
        assert "Did you mean" in out.err
        assert "Did you mean" not in out.out

    def test_main_reports_not_found(self, fake_service, capsys):
        code = cli.main(["zzzzzqqqqq", "-i", "links"])
        out = capsys.readouterr()
        assert code == 1
        assert 'No recipes found for "zzzzzqqqqq"' in out.err
        assert fake_service.closed

    def test_main_writes_corpus(self, monkeypatch, tmp_path, capsys):
        async def fake_build(service):
            return OfflineCorpus()

        monkeypatch.setattr(cli, "MealDBService", lambda **kwargs: ClosableCatalog())
        monkeypatch.setattr(cli, "build_corpus", fake_build)
        target = tmp_path / "meals.json"

        assert cli.main(["--write-corpus", str(target)]) == 0
        assert target.read_text().strip() == '{\n  "meals": []\n}'
