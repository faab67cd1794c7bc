"""Markdown rendering of changelogs."""

from deisrel.changelog.domain.entities import Changelog


def render_changelog(changelog: Changelog) -> str:
    """
    Render a changelog as Markdown.

    Sections appear in the order Features, Fixes, Documentation, Maintenance;
    empty sections are omitted.

    Args:
        changelog: Populated changelog

    Returns:
        Markdown document ending with a newline
    """
    lines = [f"### {changelog.old_release} -> {changelog.new_release}", ""]

    if changelog.is_empty():
        lines.append("No notable changes.")
        return "\n".join(lines) + "\n"

    sections = (
        ("Features", changelog.features),
        ("Fixes", changelog.fixes),
        ("Documentation", changelog.documentation),
        ("Maintenance", changelog.maintenance),
    )
    for title, entries in sections:
        if not entries:
            continue
        lines.append(f"#### {title}")
        lines.append("")
        lines.extend(f"- {entry}" for entry in entries)
        lines.append("")

    return "\n".join(lines).rstrip("\n") + "\n"
