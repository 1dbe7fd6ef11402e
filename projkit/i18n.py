"""Internationalization helpers for CLI and pipeline messages.

Provide translation strings and utilities to select the current UI
language. Message templates use ``str.format`` placeholders; callers
format the translated template themselves.

Typical usage::

    from projkit.i18n import _
    _("dir_created").format(path=project_dir)

"""

from __future__ import annotations

from projkit.config import LANG as _DEFAULT_LANG
from projkit.config import SUPPORTED_LANGUAGES

LANG: str = _DEFAULT_LANG
TEXTS: dict[str, dict[str, str]] = {
    "en": {
        "usage": "Usage: {program} <command> [args...] [--verbose] [--help]",
        "help_description": (
            "Scaffold a new project directory from the template document and "
            "set up Git, Git LFS and the remote."
        ),
        "help_commands": "Commands:",
        "help_newproject": "newproject <project-name>   create and push a new project",
        "help_options": "Options:",
        "help_verbose": "--verbose            print log messages as they happen",
        "help_help": "--help               show this message and exit",
        "help_lang": "--lang en|sv         message language",
        "help_log_level": "--log-level LEVEL    developer log level",
        "help_clean": "--clean-on-failure   remove the new directory if setup fails",
        "missing_command": "No command given. Supported commands: {commands}",
        "unknown_command": "Unknown command '{command}'. Supported commands: {commands}",
        "arg_count": "newproject expects exactly one argument (the project name), got {count}",
        "invalid_name": "'{name}' is not a valid project directory name",
        "args_ok": "Project name: {name}",
        "dir_exists": "Directory '{path}' already exists",
        "dir_created": "Created directory '{path}'",
        "dir_failed": "Could not create directory '{path}': {detail}",
        "template_missing": "Template file '{path}' not found",
        "template_copied": "Copied template '{template}' to '{path}'",
        "template_failed": "Could not copy template to '{path}': {detail}",
        "repo_initialized": "Initialized Git repository in '{path}' on branch '{branch}'",
        "git_missing": "Git executable '{executable}' not found. Is it installed and on PATH?",
        "git_unusable": "Could not run Git executable '{executable}': {detail}",
        "ignore_written": "Wrote '{pattern}' to '{path}'",
        "ignore_failed": "Could not write '{path}': {detail}",
        "lfs_missing": "Git LFS is not available: {detail}",
        "lfs_tracked": "Tracking '{pattern}' with Git LFS",
        "files_staged": "Staged {files}",
        "committed": "Created commit '{message}'",
        "remote_added": "Added remote '{remote}' -> {url}",
        "remote_missing": "No remote named '{remote}' is configured",
        "pushed": "Pushed '{branch}' to '{remote}' and set upstream tracking",
        "push_hint": (
            "Add the remote with 'git remote add {remote} <url>' inside '{path}', "
            "then run 'git push -u {remote} {branch}'"
        ),
        "command_failed": "'{command}' failed with exit code {code}: {detail}",
        "run_ok": "Project '{name}' created.",
        "run_failed": "Setup failed.",
        "run_failed_see_file": "Setup failed. See {path} for details.",
        "interrupted": "Interrupted.",
        "cleanup_done": "Removed partially created directory '{path}'",
        "cleanup_failed": "Could not remove '{path}': {detail}",
        "config_error": "Configuration error: {detail}",
        "pipeline_title": "Setup steps",
        "step_validate_arguments": "Validate arguments",
        "step_create_directory": "Create directory",
        "step_copy_template": "Copy template",
        "step_init_repository": "Initialize repository",
        "step_write_ignore_file": "Write ignore rules",
        "step_track_large_files": "Track large files",
        "step_stage_files": "Stage files",
        "step_commit": "Commit",
        "step_configure_remote": "Configure remote",
        "step_push": "Push",
    },
    "sv": {
        "usage": "Användning: {program} <kommando> [argument...] [--verbose] [--help]",
        "help_description": (
            "Skapa en ny projektkatalog från malldokumentet och sätt upp Git, "
            "Git LFS och fjärrförrådet."
        ),
        "help_commands": "Kommandon:",
        "help_newproject": "newproject <projektnamn>    skapa och pusha ett nytt projekt",
        "help_options": "Flaggor:",
        "help_verbose": "--verbose            skriv loggmeddelanden direkt",
        "help_help": "--help               visa detta meddelande och avsluta",
        "help_lang": "--lang en|sv         meddelandespråk",
        "help_log_level": "--log-level NIVÅ     loggnivå för utvecklare",
        "help_clean": "--clean-on-failure   ta bort den nya katalogen om något misslyckas",
        "missing_command": "Inget kommando angivet. Kommandon som stöds: {commands}",
        "unknown_command": "Okänt kommando '{command}'. Kommandon som stöds: {commands}",
        "arg_count": "newproject kräver exakt ett argument (projektnamnet), fick {count}",
        "invalid_name": "'{name}' är inte ett giltigt katalognamn",
        "args_ok": "Projektnamn: {name}",
        "dir_exists": "Katalogen '{path}' finns redan",
        "dir_created": "Skapade katalogen '{path}'",
        "dir_failed": "Kunde inte skapa katalogen '{path}': {detail}",
        "template_missing": "Mallfilen '{path}' hittades inte",
        "template_copied": "Kopierade mallen '{template}' till '{path}'",
        "template_failed": "Kunde inte kopiera mallen till '{path}': {detail}",
        "repo_initialized": "Initierade Git-förråd i '{path}' på grenen '{branch}'",
        "git_missing": "Git-programmet '{executable}' hittades inte. Är det installerat och finns i PATH?",
        "git_unusable": "Kunde inte köra Git-programmet '{executable}': {detail}",
        "ignore_written": "Skrev '{pattern}' till '{path}'",
        "ignore_failed": "Kunde inte skriva '{path}': {detail}",
        "lfs_missing": "Git LFS är inte tillgängligt: {detail}",
        "lfs_tracked": "Spårar '{pattern}' med Git LFS",
        "files_staged": "Lade till {files}",
        "committed": "Skapade commit '{message}'",
        "remote_added": "Lade till fjärrförrådet '{remote}' -> {url}",
        "remote_missing": "Inget fjärrförråd med namnet '{remote}' är konfigurerat",
        "pushed": "Pushade '{branch}' till '{remote}' och satte upstream",
        "push_hint": (
            "Lägg till fjärrförrådet med 'git remote add {remote} <url>' i '{path}', "
            "och kör sedan 'git push -u {remote} {branch}'"
        ),
        "command_failed": "'{command}' misslyckades med felkod {code}: {detail}",
        "run_ok": "Projektet '{name}' skapat.",
        "run_failed": "Installationen misslyckades.",
        "run_failed_see_file": "Installationen misslyckades. Se {path} för detaljer.",
        "interrupted": "Avbrutet.",
        "cleanup_done": "Tog bort den ofullständiga katalogen '{path}'",
        "cleanup_failed": "Kunde inte ta bort '{path}': {detail}",
        "config_error": "Konfigurationsfel: {detail}",
        "pipeline_title": "Installationssteg",
        "step_validate_arguments": "Kontrollera argument",
        "step_create_directory": "Skapa katalog",
        "step_copy_template": "Kopiera mall",
        "step_init_repository": "Initiera förråd",
        "step_write_ignore_file": "Skriv ignoreringsregler",
        "step_track_large_files": "Spåra stora filer",
        "step_stage_files": "Lägg till filer",
        "step_commit": "Commit",
        "step_configure_remote": "Konfigurera fjärrförråd",
        "step_push": "Push",
    },
}


def translate(key: str) -> str:
    r"""Translate a message key to the current language.

    Returns the template for ``key`` in the current ``LANG``. Unknown
    languages fall back to English and unknown keys return the key itself.

    Parameters
    ----------
    key : str
        The message key.

    Returns
    -------
    str
        The translated template, or ``key`` when no translation exists.

    Examples
    --------
    >>> translate("run_failed")
    'Setup failed.'
    >>> translate("UNKNOWN_KEY")
    'UNKNOWN_KEY'
    """
    return TEXTS.get(LANG, TEXTS["en"]).get(key, key)


_ = translate


def set_language(lang: str | None) -> str:
    """Select the UI language, falling back to English for unsupported codes.

    Parameters
    ----------
    lang : str | None
        Language code such as ``'en'`` or ``'sv'``.

    Returns
    -------
    str
        The language that is now active.
    """
    global LANG
    LANG = lang if lang in SUPPORTED_LANGUAGES else "en"
    return LANG
