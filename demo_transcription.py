#!/usr/bin/env python3
"""
Demo: Bulgarian Phonetic Transcription

Runs the transcription engine over single words, compounds and a short
passage. Pass --online to resolve stress through slovored.com.
"""

import logging
import sys

from src.bg_nlp.pipeline import BulgarianTranscriptionEngine


def show(label, value):
    print(f"   {label:38} → {value}")


def main():
    """Run transcription demo."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    online = "--online" in sys.argv[1:]

    print("=" * 80)
    print("BULGARIAN PHONETIC TRANSCRIPTION DEMO")
    print("=" * 80)

    print("\n🚀 Initializing engine...")
    with BulgarianTranscriptionEngine(search_website=online) as engine:
        print(f"✓ Engine ready (stress lookup: {'slovored.com' if online else 'off'})\n")

        print("📝 Known stress:")
        show('transcribe_word("череша", 3)', engine.transcribe_word("череша", 3))
        show('transcribe_word("най-красива", 1, 8)', engine.transcribe_word("най-красива", 1, 8, True))
        show('transcribe_word("светлосин", 7, 2, False)', engine.transcribe_word("светлосин", 7, 2, False))
        show('transcribe_word("по-добре", 4)', engine.transcribe_word("по-добре", 4))

        print("\n🔤 Stress candidates:")
        for word in ("апартамент", "хладилник", "свѐтлосѝн"):
            show(f'transcribe("{word}")', ", ".join(engine.transcribe(word)))

        print("\n📖 Passages:")
        text = "Като дете живеех в града, до голямата гара."
        print(f"   Input: {text}")
        for candidate in engine.transcribe(text):
            print(f"   → {candidate}")
        show('transcribe("от град")', engine.transcribe("от град")[0])
        engine.set_clitics([])
        show('transcribe("от град") without clitics', engine.transcribe("от град")[0])

        print("\n🔧 Helpers:")
        show('syllabify("хладилник")', " · ".join(engine.syllabify("хладилник")))
        for letter, flag in (("а", True), ("а", False), ("л", False), ("дж", False)):
            show(f'convert_grapheme("{letter}", {flag})', engine.convert_grapheme(letter, flag))

        if online:
            print("\n🌐 Online lookup:")
            show('lookup_stress("череша")', engine.lookup_stress("череша"))

    print("\n" + "=" * 80)
    print("✅ DEMO COMPLETE")
    print("=" * 80)


if __name__ == "__main__":
    main()
