"""Instruction templates sent to the providers."""

from ..model import PromptFormat

METRIC_PARAMETERS = (
    "Tokens",
    "Clarity",
    "Precision",
    "Edge Case Handling",
    "Format Compliance",
)

EXECUTE_PREFIX = "Execute this prompt and provide a sample response: "


def optimization_instruction(input_format: PromptFormat, output_format: PromptFormat) -> str:
    """Instruction asking for a strict, preamble-free rewrite in the output format."""
    return f"""You are an expert prompt engineer. Your task is to optimize the provided user prompt.

Input Format: {input_format.label}
Desired Output Format: {output_format.label}

Guidelines:
1. Clarity & Precision: Remove all ambiguity and fluff.
2. Effectiveness: Ensure the result is optimized for LLMs.
3. Structure: Output the result STRICTLY in {output_format.label} format.
4. No Filler: Return ONLY the optimized prompt content. No preamble, labels, or additional text."""


def optimization_user_message(
    prompt: str, input_format: PromptFormat, output_format: PromptFormat
) -> str:
    return (
        f"Original Prompt ({input_format.label}): {prompt}\n\n"
        f"Optimized Prompt ({output_format.label}):"
    )


def execution_prompt(prompt: str) -> str:
    return f"{EXECUTE_PREFIX}{prompt}"


def comparison_prompt(original_prompt: str, optimized_prompt: str) -> str:
    """Ask for a scored comparison returned as a single JSON document."""
    return f"""Compare the following two prompts.
Original: "{original_prompt}"
Optimized: "{optimized_prompt}"

Evaluate them on these specific criteria for a professional comparison table:
1. **Tokens**: Estimated token usage for both (qualitative comparison).
2. **Clarity**: Score (1-10) for both.
3. **Precision**: Score (1-10) for both.
4. **Edge Case Handling**: Score (1-10) for both.
5. **Format Compliance**: How well it follows instructions like "JSON" or "YAML".

Additionally, perform a **Benchmarking**:
- Assign a total score (0-100) to both.
- Explicitly decide a "Winner".
- Analyze if the prompts would perform differently across formats (JSON vs Text vs YAML).

Return the response in this exact JSON format, with every value a string except the two integer scores:
{{
    "metrics": [
        {{ "parameter": "Tokens", "original": "Estimated 120", "optimized": "Estimated 85", "winner": "Optimized" }},
        {{ "parameter": "Clarity", "original": "6/10", "optimized": "9/10", "winner": "Optimized" }},
        {{ "parameter": "Precision", "original": "5/10", "optimized": "9.5/10", "winner": "Optimized" }},
        {{ "parameter": "Edge Case Handling", "original": "4/10", "optimized": "8/10", "winner": "Optimized" }},
        {{ "parameter": "Format Compliance", "original": "N/A", "optimized": "10/10", "winner": "Optimized" }}
    ],
    "benchmark": {{
        "originalScore": 45,
        "optimizedScore": 85,
        "winner": "Optimized",
        "reason": "Why the winner is better...",
        "formatAnalysis": "How different formats affect this prompt's performance..."
    }},
    "summary": "Overall comparison summary..."
}}

Each "winner" must be exactly "Original" or "Optimized"."""
