"""User-facing crawl configuration."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

SILENT = logging.CRITICAL + 1


@dataclass
class Options:
    """Configuration for a crawl, as given by the user."""

    urls: list[str] = field(default_factory=list)
    resume: str = ""
    exclude: list[str] = field(default_factory=list)
    scope: list[str] = field(default_factory=list)
    out_of_scope: list[str] = field(default_factory=list)
    no_scope: bool = False
    display_out_scope: bool = False
    extensions_match: list[str] = field(default_factory=list)
    extension_filter: list[str] = field(default_factory=list)
    output_match_condition: str = ""
    output_filter_condition: str = ""
    max_depth: int = 0
    body_read_size: int = 0
    timeout: int = 0
    crawl_duration: float = 0.0
    delay: int = 0
    rate_limit: int = 0
    retries: int = 0
    rate_limit_minute: int = 0
    concurrency: int = 0
    parallelism: int = 0
    form_config: str = ""
    proxy: str = ""
    strategy: str = ""
    field_scope: str = ""
    output_file: str = ""
    known_files: str = ""
    fields: str = ""
    store_fields: str = ""
    field_config: str = ""
    no_colors: bool = False
    json: bool = False
    silent: bool = False
    verbose: bool = False
    tech_detect: bool = False
    version: bool = False
    scrape_js_responses: bool = False
    scrape_jsluice_responses: bool = False
    custom_headers: list[str] = field(default_factory=list)
    headless: bool = False
    automatic_form_fill: bool = False
    form_extraction: bool = False
    use_installed_chrome: bool = False
    show_browser: bool = False
    headless_optional_arguments: list[str] = field(default_factory=list)
    headless_no_sandbox: bool = False
    system_chrome_path: str = ""
    chrome_ws_url: str = ""
    on_result: Callable[[Any], None] | None = None
    store_response: bool = False
    store_response_dir: str = ""
    no_clobber: bool = False
    store_field_dir: str = ""
    omit_raw: bool = False
    omit_body: bool = False
    chrome_data_dir: str = ""
    headless_no_incognito: bool = False
    xhr_extraction: bool = False
    health_check: bool = False
    pprof_server: bool = False
    error_log_file: str = ""
    resolvers: list[str] = field(default_factory=list)
    output_match_regex: list[str] = field(default_factory=list)
    output_filter_regex: list[str] = field(default_factory=list)
    filter_regex: list[re.Pattern[str]] = field(default_factory=list)
    match_regex: list[re.Pattern[str]] = field(default_factory=list)
    disable_update_check: bool = False
    ignore_query_params: bool = False
    debug: bool = False
    tls_impersonate: bool = False
    disable_redirects: bool = False

    def parse_custom_headers(self) -> dict[str, str]:
        """Return the ``name: value`` custom headers as a mapping."""
        headers: dict[str, str] = {}
        for item in self.custom_headers:
            name, sep, value = item.partition(":")
            if sep:
                headers[name.strip(" ")] = value.strip(" ")
        return headers

    def parse_headless_optional_arguments(self) -> dict[str, str]:
        """Return browser arguments; bare items continue the previous value."""
        arguments: dict[str, str] = {}
        last_key = ""
        for item in self.headless_optional_arguments:
            if not item:
                continue
            key, sep, value = item.partition("=")
            if sep:
                key, value = key.strip(), value.strip()
                if key and value:
                    arguments[key] = value
                    last_key = key
            elif not item.startswith("--"):
                arguments[last_key] = arguments.get(last_key, "") + "," + item
            else:
                arguments[item] = ""
        return arguments

    def should_resume(self) -> bool:
        """Return True if a resume file is named and exists."""
        return bool(self.resume) and os.path.isfile(self.resume)

    def configure_output(self) -> int:
        """Set the package log level from the verbosity options and return it."""
        if self.silent:
            level = SILENT
        elif self.verbose:
            level = logging.INFO
        elif self.debug:
            level = logging.DEBUG
        else:
            level = logging.INFO
        logging.getLogger("crawlscope").setLevel(level)
        return level