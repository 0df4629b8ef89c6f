# crawlscope

A library of building blocks for web crawlers. It decides what a crawler
visits, what it skips and how it reports what it found.

## Installation

```
pip install crawlscope
```

To run the test suite:

```
pip install "crawlscope[test]"
pytest
```

## What is inside

- `crawlscope.scope.ScopeManager` keeps a crawl on its own site. It matches
  hosts by domain name (`dn`), registered domain (`rdn`), exact host (`fqdn`)
  or a custom host regex, and also applies in-scope and out-of-scope URL
  regexes. Invalid regexes raise `ScopeError`.
- `crawlscope.domains` has the public-suffix helpers `public_suffix`,
  `effective_tld_plus_one` and `domain_rdn_and_dn`. They use a small built-in
  list of common suffixes, not the full public suffix list. A top-level
  domain that is not on the list is still treated as a suffix.
- `crawlscope.extensions.Validator` allows or denies URLs and paths by file
  extension. It has a built-in deny list (`DEFAULT_DENYLIST`) for media,
  archives and binaries. An allow list, when one is given, takes precedence
  over the deny list.
- `crawlscope.filters.SimpleFilter` is an in-memory filter that removes
  duplicate URLs and duplicate response bodies (by MD5). Its `is_cycle`
  method flags URLs that are too long or that repeat one long substring many
  times. `longest_repeating_sequence` is available on its own.
- `crawlscope.queue.Queue` is a thread-safe crawl frontier. It works
  breadth-first (lowest priority first) or depth-first (as a stack). Its
  `pop()` is a generator that ends once the queue has stayed empty for longer
  than the timeout. `PriorityQueue` and `Stack` can be used on their own.
- `crawlscope.endpoints` extracts candidate endpoints from HTML bodies
  (`extract_body_endpoints`) and from JavaScript (`extract_relative_endpoints`).
- `crawlscope.formfields.parse_form_fields` lists the `Form`s in a page, with
  their action (resolved against a base URL), method, encoding and parameter
  names.
- `crawlscope.urls` has helpers for `Link`, `Refresh` and `srcset` values
  (`parse_link_tag`, `parse_refresh_tag`, `parse_srcset_tag`), and also
  `is_url`, `flatten_headers`, `replace_all_query_param`, `merge_data_maps`
  and `web_user_agent`.
- `crawlscope.fields` turns a URL into output fields: `url`, `path`, `fqdn`,
  `rdn`, `rurl`, `qurl`, `qpath`, `file`, `ufile`, `key`, `value`, `kv`,
  `dir` and `udir`. `format_field` returns them as `FieldOutput` items.
  `store_fields` appends them to per-host files. `validate_field_names`
  raises `FieldError` for unknown names.
- `crawlscope.custom_fields` loads user-defined regex fields from a YAML
  file. `init_custom_field_config_file` writes a default config, holding an
  `email` field, to `~/.config/crawlscope/field-config.yaml` if that file is
  missing.
- `crawlscope.options.Options` holds crawler settings. It parses custom
  headers and headless browser arguments, and `configure_output` sets the
  `crawlscope` log level.
- `crawlscope.storage` covers what is kept on disk. `FileWriter` writes one
  record per line. `ErrorRecord.to_json` formats an error log entry. The
  remaining functions name and index stored responses and manage numbered
  response directories.

## Examples

Scope checking:

```python
from crawlscope.scope import ScopeManager

manager = ScopeManager([], [r"logout\.php"], "rdn", False)
manager.validate("https://sub.example.com/index.php", "example.com")   # True
manager.validate("https://sub.example.com/logout.php", "example.com")  # False
```

Extension filtering:

```python
from crawlscope.extensions import Validator

validator = Validator(None, [".php"])
validator.validate_path("https://example.com/app.js")    # True
validator.validate_path("https://example.com/logo.png")  # False, on the default deny list
```

A breadth-first frontier:

```python
from crawlscope.queue import Queue

frontier = Queue("breadth-first", 0)
frontier.push("https://example.com/deep/page", 3)
frontier.push("https://example.com/", 1)
for url in frontier.pop():
    print(url)  # lowest priority first
```

Output fields:

```python
from crawlscope.fields import format_field

for item in format_field("https://www.example.com/docs/guide.html?lang=en", "rdn,file,kv", {}):
    print(item.field, item.value)
```

## What it does not do

crawlscope is a set of parts, not a crawler:

- It does not fetch pages, drive a browser, detect technologies or limit
  request rates.
- It has no command-line tool.
- It has no single output writer that filters results and prints them to
  the screen or to a file. It also does not evaluate match or filter
  expressions. `Options.output_match_condition` and
  `Options.output_filter_condition` are stored but not used by anything in
  the package.