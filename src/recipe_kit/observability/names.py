# src/recipe_kit/observability/names.py

"""Standard metric names for recipe-kit observability.

Use these constants instead of hardcoded strings.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# LLM Metrics
# ============================================================================

# Duration
LLM_COMPLETION_DURATION = "llm_completion_duration"

# Counters
LLM_REQUESTS_TOTAL = "llm_requests_total"
LLM_ERRORS_TOTAL = "llm_errors_total"

# Counters (token usage)
LLM_TOKENS_PROMPT = "llm_tokens_prompt"
LLM_TOKENS_COMPLETION = "llm_tokens_completion"
LLM_TOKENS_TOTAL = "llm_tokens_total"


# ============================================================================
# Parsing Metrics
# ============================================================================

# Duration
PARSE_DURATION = "recipe_parse_duration"

# Counters
PARSE_SECTIONS_TOTAL = "recipe_parse_sections_total"
PARSE_SUBSECTIONS_TOTAL = "recipe_parse_subsections_total"

# Counters (assembly)
RECIPES_ASSEMBLED_TOTAL = "recipes_assembled_total"
RECIPE_VALIDATION_WARNINGS_TOTAL = "recipe_validation_warnings_total"


# ============================================================================
# Scaling Metrics
# ============================================================================

# Counters
SCALING_LINES_TOTAL = "scaling_lines_total"
SCALING_PASSTHROUGH_TOTAL = "scaling_passthrough_total"


# ============================================================================
# Generation Metrics
# ============================================================================

# Duration
GENERATION_DURATION = "recipe_generation_duration"

# Counters
GENERATION_REQUESTS_TOTAL = "recipe_generation_requests_total"
GENERATION_ERRORS_TOTAL = "recipe_generation_errors_total"

# Gauges
GENERATION_LAST_COST = "recipe_generation_last_cost"
