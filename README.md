# accessrules

Building blocks for a model-driven access control engine:

- **`accessrules.config`**: reads the INI-like model configuration format
  (sections, `#`/`;` comments, `\` line continuation) into a `Config`.
- **`accessrules.effector`**: the `Effect` values and a `DefaultEffector`
  that merges per-rule matcher results into one decision for the standard
  policy effects (allow-override, deny-override, allow-and-deny, priority,
  subject priority).
- **`accessrules.context`**: `EnforceContext`, which names the request,
  policy, effect and matcher definitions that one enforcement call uses.
- **`accessrules.cachekey`**: builds decision-cache keys from request values.
- **`accessrules.parameters`**: resolves the `r_*` and `p_*` names of a
  matcher expression to request and policy values, and turns matcher results
  and `eft` columns into effects.

The package has no third-party dependencies.

## Installation

```
pip install .
```

## Reading a model configuration

```python
from accessrules.config import Config

conf = Config.from_text("""
[request_definition]
r = sub, obj, act

[matchers]
m = r.sub == p.sub \\
    && r.obj == p.obj
""")

conf.get_string("request_definition::r")   # "sub, obj, act"
conf.get_strings("request_definition::r")  # ["sub", " obj", " act"]
conf.get_string("matchers::m")             # "r.sub == p.sub && r.obj == p.obj"
```

`Config.from_file(path)` reads the same format from a file. A key without a
section (`"debug"`) is looked up in the `default` section, and keys are
case-insensitive. A missing key reads as `""` (or `[]` from `get_strings`).
`set("section::option", value)` stores a value; an empty key raises
`ConfigError`.

`get_bool`, `get_int` (64-bit signed range) and `get_float` raise
`ConfigError`, a subclass of `ValueError`, when the value does not convert.
A line without `=` raises `ConfigError` while the text is parsed.

## Merging effects

```python
from accessrules.effector import DefaultEffector, Effect

effector = DefaultEffector()
effect, index = effector.merge_effects(
    "some(where (p_eft == allow))",
    [Effect.ALLOW],
    [1.0],
    0,
    1,
)
# effect is Effect.ALLOW and index is 0, the rule that decided it
```

The index is `-1` when no single rule decided the result. An expression the
effector does not know raises `UnsupportedEffectError`. `Effector` is the
abstract base class for writing other effectors.

## Enforce contexts and cache keys

```python
from accessrules.context import new_enforce_context, split_enforce_context
from accessrules.cachekey import get_cache_key

ctx = new_enforce_context("2")     # r2, p2, e2, m2
ctx.cache_key()                    # "EnforceContext{r2-p2-e2-m2}"

context, rvals = split_enforce_context([ctx, "alice", "data1", "read"])
# context is ctx, rvals is ["alice", "data1", "read"]

get_cache_key("alice", "data1", "read")   # "alice$$data1$$read$$"
get_cache_key(ctx, "alice")               # "EnforceContext{r2-p2-e2-m2}$$alice$$"
get_cache_key("alice", 42)                # None: not cacheable
```

Any object with a callable `cache_key()` method counts as a `CacheableParam`.

## Matcher parameters

```python
from accessrules.parameters import EnforceParameters, index_tokens, match_result, effect_of

params = EnforceParameters(
    r_tokens=index_tokens(["r_sub", "r_obj", "r_act"]),
    r_vals=["alice", "data1", "read"],
    p_tokens=index_tokens(["p_sub", "p_obj", "p_act"]),
    p_vals=["alice", "data1", "read"],
)
params.get("r_sub")    # "alice"
params.get("p_act")    # "read"

match_result(True)     # 1.0
match_result(0)        # 0.0
effect_of("deny")      # Effect.DENY
effect_of(None)        # Effect.ALLOW (policy without an eft field)
```

An unknown name raises `ParameterNotFoundError`; a matcher result that is
neither a bool nor a number raises `MatcherResultError`.

## What this package does not do

It provides the pieces above and nothing more. There is no enforcer that
loads a model and policy and answers requests, no matcher expression
evaluator, no role manager, no policy storage or adapters, and no decision
cache store: `get_cache_key` only builds the key.

## Running the tests

```
pip install .[test]
pytest
```