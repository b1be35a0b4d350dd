import argparse
import os
import sys
from pathlib import Path
from typing import Any

import requests

PROXY_URL = os.getenv("TRANSLATION_PROXY_URL", "http://127.0.0.1:8000")
PROVIDER_API_KEY = os.getenv("PROVIDER_API_KEY", "")


def translate(
    text: str,
    target_lang: str,
    *,
    source_lang: str = "auto",
    style: str = "intelligent",
    provider: str = "anthropic",
    model: str | None = None,
    api_key: str = PROVIDER_API_KEY,
) -> dict[str, Any]:
    body: dict[str, Any] = {
        "text": text,
        "sourceLang": source_lang,
        "targetLang": target_lang,
        "style": style,
        "provider": provider,
        "apiKey": api_key,
    }
    if model:
        body["model"] = model
    response = requests.post(f"{PROXY_URL}/api/translate", json=body, timeout=15)
    payload = response.json()
    if not response.ok:
        raise RuntimeError(f"HTTP {response.status_code}: {payload.get('error', 'Translation failed')}")
    return payload


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Translate text through the translation proxy.")
    parser.add_argument("text", help="Text to translate, or @path to read it from a file")
    parser.add_argument("--to", dest="target_lang", default="pt-BR")
    parser.add_argument("--from", dest="source_lang", default="auto")
    parser.add_argument("--style", default="intelligent")
    parser.add_argument("--provider", default="anthropic", choices=["anthropic", "openai"])
    parser.add_argument("--model", default=None)
    args = parser.parse_args(argv)

    text = Path(args.text[1:]).read_text(encoding="utf-8") if args.text.startswith("@") else args.text

    try:
        result = translate(
            text,
            args.target_lang,
            source_lang=args.source_lang,
            style=args.style,
            provider=args.provider,
            model=args.model,
        )
    except RuntimeError as exc:
        print(f"Translation failed: {exc}", file=sys.stderr)
        return 1

    print(result["translation"])
    print(
        f"({result['provider']}: {result['originalLength']} -> {result['translationLength']} chars)",
        file=sys.stderr,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
