# varnavinyas

Tools for written Nepali: punctuation checks following the Nepal Academy
conventions (Section 5), Devanagari ↔ IAST transliteration, partial one-way
decoding of the Preeti and Kantipur legacy font encodings, a
Devanagari-aware tokenizer, and helpers for editor integrations.

The package has no dependencies outside the standard library.

## Installation

```
pip install varnavinyas
```

To run the test suite:

```
pip install "varnavinyas[test]"
pytest
```

## Punctuation

`varnavinyas.punctuation.check_punctuation(text)` returns a list of
`LekhyaDiagnostic` objects sorted by the start of their span. Each has
`span` (a `(start, end)` pair of UTF-8 byte offsets into the input),
`found`, `expected` and `rule` (a Section 5 citation).

```python
from varnavinyas.punctuation import check_punctuation

for diag in check_punctuation("नेपाल सुन्दर देश हो."):
    print(diag.span, diag.found, "->", diag.expected, diag.rule)
# (49, 50) . -> । Section 5: पूर्णविराम (।) ...
```

Only text with Devanagari nearby is checked. The checks are:

- a period at the end of a line or of the text, or followed by a space,
  after Devanagari text, where `।` belongs; abbreviations such as `डा.`,
  `श्री.` and chains like `अ. दु. अ. आ.` or `त्रि.वि.` are left alone;
- three or more periods, which should be `…`;
- straight `"` and `'`, which should be curly quotes (opening or closing
  chosen from the preceding character);
- a space before `?`, `!`, `;` or `,`;
- spaces around `/` joining alternatives;
- ऐजन commas separated by spaces (`, ,` instead of `,,`);
- an unmatched `(` or `)`.

`PunctuationMark` enumerates the fourteen Nepali punctuation marks, and
`LekhyaError` is the module's exception type.

## Transliteration

```python
from varnavinyas.scheme import Scheme
from varnavinyas.transliteration import transliterate, detect_scheme

transliterate("नमस्ते", Scheme.DEVANAGARI, Scheme.IAST)   # "namaste"
transliterate("namaste", Scheme.IAST, Scheme.DEVANAGARI)  # "नमस्ते"
transliterate("fk", Scheme.PREETI, Scheme.DEVANAGARI)     # "कि"
detect_scheme("namaskāra")                                 # Scheme.IAST
detect_scheme("नमस्ते")                                    # Scheme.DEVANAGARI
```

Supported directions are Devanagari → IAST, IAST → Devanagari,
Preeti → Devanagari and Kantipur → Devanagari. Empty input gives an empty
string and a scheme converted to itself is returned unchanged; any other
pair raises `UnsupportedPairError`, a subclass of `LipiError` (both in
`varnavinyas.scheme`, alongside `InvalidInputError` and
`UnmappableCharError`). Characters without a mapping pass through.

`devanagari_to_iast` and `iast_to_devanagari` can also be called directly.
`detect_scheme` returns `None` for empty text or text that is neither
mostly Devanagari nor Latin.

### Legacy fonts

`varnavinyas.legacy` decodes legacy font text one way only, and its
mappings are incomplete: multi-character sequences and positional variants
are not handled. In Preeti the i-matra (`f`/`F`) is moved after the
character that follows it.

```python
from varnavinyas.legacy import preeti_to_unicode, kantipur_to_unicode

preeti_to_unicode("fk")     # "कि"
preeti_to_unicode("123")    # "१२३"
kantipur_to_unicode("123")  # "१२३"
```

Kantipur covers only a basic set of consonants and the numerals.

## Tokenizing

```python
from varnavinyas.tokenizer import tokenize

[t.text for t in tokenize("नेपाल राम्रो देश हो।")]
# ["नेपाल", "राम्रो", "देश", "हो"]
```

Text is split on whitespace, surrounding punctuation (including `।` and
`…`) is stripped, and pieces without any Devanagari character are dropped.
Each `Token` carries `start` and `end` UTF-8 byte offsets into the input.

## Editor integration helpers

- `varnavinyas.linemap.LineIndex(text)` converts between UTF-8 byte offsets
  and `Position(line, character)` values, where `character` counts UTF-16
  code units, as editors expect. `byte_span_to_range` turns a diagnostic
  span into a `Range`. Offsets outside the text or inside a character raise
  `ValueError`.
- `varnavinyas.categories.DiagnosticCategory` lists the diagnostic
  categories; `as_code()` gives a stable machine code and `str()` gives the
  Nepali label.
- `varnavinyas.config.Config.from_settings(settings)` reads a settings
  mapping with the keys `categories` (camelCase toggles such as
  `hrasvaDirgha` or `shuddhaTable`), `punctuation_mode` (`"strict"` or
  `"normalized-editorial"`) and `debug_include_noop_heuristics`. Missing
  keys keep their defaults (all categories on, strict mode, debug off);
  unknown keys are ignored; values of the wrong kind raise `ValueError`.
  `EnabledCategories.is_enabled(category)` tells whether a category is
  switched on.

## What this package does not do

It has no word-level spell checker: there is no lexicon or correction
table, so misspelled words are not detected or corrected. Nor does it
include an editor language server or a command-line tool; the helpers
above are building blocks for one, and nothing in the package publishes
diagnostics to an editor by itself.