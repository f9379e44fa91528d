# bookrender

Building blocks for turning a book written in Markdown into a static HTML
site: Markdown rendering with link rewriting, header anchors, code-block
post-processing, a table of contents, previous/next navigation, theme
loading and the file-writing steps of a site build.

## Installation

```
pip install bookrender
```

To run the test suite, install the test extra:

```
pip install "bookrender[test]"
pytest
```

## Modules

- `bookrender.markdown`: `render_markdown(text, curly_quotes)` and
  `render_markdown_with_path(text, curly_quotes, path)` render Markdown to
  HTML (tables, footnotes, strikethrough and task lists enabled). Link and
  image targets ending in `.md` become `.html`; targets with a scheme such as
  `https:` are left alone. When `path` is given, relative links are prefixed
  with the page's directory and fragment-only links with the page itself.
  With `curly_quotes` set, straight quotes, `...` and runs of dashes are
  turned into typographic characters. Spaces and tabs in a fenced code
  block's info string become commas in its `language-` class. Also provides
  `normalize_id`, `id_from_content`, `unique_id_from_content`,
  `bracket_escape` and `collapse_whitespace`.
- `bookrender.strings`: line selection for includes: `take_lines`,
  `take_anchored_lines`, `take_rustdoc_include_lines` and
  `take_rustdoc_include_anchored_lines`. Ranges are given as `start` and
  `stop` (either may be `None`); anchors are `ANCHOR: name` /
  `ANCHOR_END: name` markers. The "rustdoc" variants keep every line and
  prefix those outside the selection with `# `.
- `bookrender.postprocess`: `build_header_links` gives each `<hN>` header a
  unique id and a self-link, `fix_code_blocks` turns comma-separated code
  classes into space-separated ones, and `add_playground_pre` wraps code in
  the languages listed in a `Playground` in `<pre class="playground">`. Rust
  blocks get an edition class from `RustEdition` and, unless they already
  contain `fn main`, a hidden `main` wrapper. `partition_source` and
  `insert_link_into_header` are the helpers behind these.
- `bookrender.hidelines`: `hide_lines(html, code_config)` wraps hidden lines
  of code blocks in `<span class="boring">`. Rust lines starting with `#` are
  hidden (`##` escapes a literal `#`); other languages use a `hidelines=`
  class or the per-language prefix in `CodeConfig.hidelines`.
  `post_process` runs header links, code class fixes, playground wrapping and
  line hiding in that order.
- `bookrender.toc`: `render_toc(data, no_section_label)` builds the sidebar
  table of contents as nested `<ol>` HTML from page data holding `chapters`,
  `path`, `fold_enable`, `fold_level` and optionally `section`.
- `bookrender.navigation`: `previous_chapter`, `next_chapter`,
  `find_chapter` (with `NavTarget`) and `chapter_link` find neighbouring
  chapters and return `title`, `link` and `path_to_root` values;
  `theme_option` labels a theme name, adding ` (default)` for the default
  theme.
- `bookrender.theme`: `Theme` holds the templates, stylesheets, scripts and
  favicons of a theme as bytes. `Theme.load(theme_dir, default)` starts from
  `default` (or an empty theme) and replaces each part found in `theme_dir`.
  If only one of `favicon.png` and `favicon.svg` is present, the other is set
  to `None`. `load_file_contents` reads a file as bytes.
- `bookrender.site`: steps of writing a site: `write_theme_files`,
  `copy_additional_files`, `emit_redirect` / `emit_redirects` (which refuse
  to overwrite existing files), `configure_print_version`, `chapter_title`,
  `not_found_title`, `edit_url` and `maybe_wrong_theme_dir`.
- `bookrender.fsutil`: `write_file`, `create_file`, `path_to_root`,
  `normalize_path`, `remove_dir_content`, `copy_files_except_ext` and
  `get_404_output_file`.
- `bookrender.tomlpath`: dotted-key access into nested configuration
  dictionaries with `read`, `insert` and `delete`.

## Example

```python
from bookrender.hidelines import CodeConfig, post_process
from bookrender.markdown import render_markdown
from bookrender.postprocess import Playground, RustEdition

html = render_markdown("# Intro\n\nSee [the next page](next.md).", False)
page = post_process(html, Playground(), CodeConfig(), RustEdition.E2021)
print(page)
```

```python
from bookrender.tomlpath import insert, read

config = {}
insert(config, "output.html.curly-quotes", True)
assert read(config, "output.html.curly-quotes") is True
```

## What it does not do

bookrender is a library of pieces, not a complete site generator. It has no
command-line tool, does not read a book's summary or configuration file, and
does not run a template engine: page templates in a `Theme` are loaded as
bytes and left for the caller to render, and `emit_redirect` takes a
rendering function from the caller. It ships no default theme files, fonts
or scripts, and it does not build a search index.