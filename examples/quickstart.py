# %% [markdown]
# # fuzzyratio: Quickstart
#
# Fuzzy string matching scores two strings from 0 (nothing in common) to
# 100 (the same text). Different scorers forgive different kinds of mess:
#
# ```
# "new york mets"                    vs  "new YORK mets"            (case)
# "new york mets"                    vs  "the wonderful new york mets"  (extra text)
# "new york mets vs atlanta braves"  vs  "atlanta braves vs new york mets"  (word order)
# "fuzzy was a bear"                 vs  "fuzzy fuzzy was a bear"   (repeated words)
# ```
#
# | Part | Topic |
# |------|-------|
# | 1 | The scorers |
# | 2 | Searching a list |
# | 3 | Polars |
# | 4 | Under the hood: edit scripts |

# %%
import polars as pl

import fuzzyratio as fr

# %% [markdown]
# ---
# ## Part 1: The scorers

# %%
pairs = [
    ("new york mets", "new YORK mets"),
    ("new york mets", "the wonderful new york mets"),
    ("new york mets vs atlanta braves", "atlanta braves vs new york mets"),
    ("fuzzy was a bear", "fuzzy fuzzy was a bear"),
]

scorers = [
    fr.ratio,
    fr.partial_ratio,
    fr.token_sort_ratio,
    fr.token_set_ratio,
    fr.wratio,
]

for s1, s2 in pairs:
    print(f"{s1!r} vs {s2!r}")
    for scorer in scorers:
        print(f"  {scorer.__name__:<18} {scorer(s1, s2):>3}")

# %% [markdown]
# `wratio` is the usual default: it looks at the lengths of the two strings
# and picks the scorers that make sense for them. Partial matches are capped
# at 90 and reordered matches at 95, so only the same text scores 100.

# %% [markdown]
# ---
# ## Part 2: Searching a list

# %%
teams = ["atlanta braves", "new york mets", "new york yankees", "boston red sox"]

for match in fr.extract("new york", teams, limit=2):
    print(f"  [{match.score:>3}] {match.text}")

best = fr.extract_one("red sox", teams)
print(f"Best match for 'red sox': {best.text} ({best.score})")

# Any scorer can drive best_matches
matches = fr.best_matches(teams, "yankees new york", scorer="token_sort_ratio", limit=1)
print(matches[0])

# %% [markdown]
# ---
# ## Part 3: Polars
#
# Importing fuzzyratio registers a `.fuzzy` namespace on Polars expressions.

# %%
df = pl.DataFrame({"raw_team": ["NY Mets", "braves", "Red Sox!", None]})

df.with_columns(
    team=pl.col("raw_team").fuzzy.best_match(teams, min_score=80),
    normalized=pl.col("raw_team").fuzzy.normalize(),
    score=pl.col("raw_team").fuzzy.similarity("new york mets"),
)

# %% [markdown]
# ---
# ## Part 4: Under the hood
#
# Every score comes from a Levenshtein alignment of the two strings.
# `StringMatcher` keeps the alignment around so you can look at it.

# %%
m = fr.StringMatcher("this is interesting", "this is cool")
print(f"distance: {m.distance()}")
print(f"ratio:    {m.ratio():.3f}")
for op in m.opcodes():
    print(f"  {op.tag.value:<8} s1[{op.src_start}:{op.src_end}] -> s2[{op.dest_start}:{op.dest_end}]")
for block in m.matching_blocks():
    print(f"  block {block}")
