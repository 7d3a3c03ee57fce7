"""Render the single-page prompt form."""

from __future__ import annotations

from html import escape

from schemas.generation import GenerationOutcome, NotRequested


PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
</head>
<body>
    <h1>Ask Gemini</h1>
    <form action="/generate-text" method="POST">
        <label for="prompt">Enter your prompt:</label><br>
        <input type="text" id="prompt" name="prompt" size="50" required>
        <button type="submit">Get Response</button>
    </form>

    <hr>

    <h2>Gemini Response:</h2>
    <div>
        <pre>{response}</pre>
    </div>
</body>
</html>
"""


def render_page(
    outcome: GenerationOutcome | None = None, title: str = "Ask Gemini"
) -> str:
    """Return the full HTML document showing ``outcome``.

    Dynamic text is HTML-escaped, so generated markup is shown literally
    rather than interpreted by the browser.
    """
    if outcome is None:
        outcome = NotRequested()
    return PAGE_TEMPLATE.format(
        title=escape(title),
        response=escape(outcome.display_text),
    )
