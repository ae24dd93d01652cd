"""Show configuration command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import ConfigShowOutput
from .ImgVaultConfig import ImgVaultConfig


def cmd_show(section: str = "") -> StageResult:
    """Show one configuration section, or the section names when ``section`` is empty."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = str(ImgVaultConfig.get_config_path())

        def respond(content: dict, message: str, errors: list[str]) -> None:
            result_obj.output = ConfigShowOutput(
                errors=errors, warnings=[], section=section, content=content, config_path=config_path
            ).model_dump(mode="python")
            result_obj.result = message
            result_obj.success = not errors

        yield (0.3, "Loading configuration...")
        try:
            config = ImgVaultConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            respond({}, f"Config show failed: {e}", [str(e)])
            return

        sections = config.to_dict()
        yield (1.0, "Complete")
        if not section:
            respond({"sections": list(sections)}, f"Found {len(sections)} section(s)", [])
        elif section in sections:
            respond(sections[section], f"Retrieved configuration for '{section}'", [])
        else:
            respond({}, f"Section '{section}' not found", [f"Unknown section: {section} (available: {', '.join(sections)})"])

    announce = f"Showing configuration for section '{section}'..." if section else "Listing configuration sections..."
    return StageResult(announce=announce, progress_callback=do_work)
