"""Tests for pipegrid utilities."""


class TestGetLogger:
    """Tests for get_logger namespacing."""

    def test_get_logger(self) -> None:
        from pipegrid.utils.logger import get_logger

        logger = get_logger("mymodule")
        assert logger.name == "pipegrid.mymodule"

    def test_logger_with_pipegrid_prefix(self) -> None:
        from pipegrid.utils.logger import get_logger

        logger = get_logger("pipegrid.parser")
        assert logger.name == "pipegrid.parser"

    def test_logger_name_starting_with_pipegrid_not_submodule(self) -> None:
        from pipegrid.utils.logger import get_logger

        logger = get_logger("pipegrid_other")
        assert logger.name == "pipegrid.pipegrid_other"

    def test_logger_exact_pipegrid_name(self) -> None:
        from pipegrid.utils.logger import get_logger

        logger = get_logger("pipegrid")
        assert logger.name == "pipegrid"

    def test_reexported(self) -> None:
        from pipegrid.utils import get_logger

        assert get_logger("x").name == "pipegrid.x"
