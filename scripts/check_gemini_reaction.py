import argparse
import asyncio

from toothtutor.core.domain import Condition
from toothtutor.core.reactions import ReactionResolver


async def check_reaction(remedy: str, condition: Condition):
    """Send one real reaction request to Gemini and print what comes back."""
    resolver = ReactionResolver()
    client = resolver.client

    if not client.is_available:
        print("❌ ERROR: No GEMINI_API_KEY found in environment or .env file.")
        return

    print(f"Asking {client.get_stats()['model']} about '{remedy}' on a {condition.label}...")
    reaction = await resolver.resolve(remedy, condition)

    print("\n" + "=" * 50)
    print("🦷 REACTION:")
    print("=" * 50)
    for key, value in reaction.to_dict().items():
        print(f"{key:22} {value}")
    print("=" * 50)

    if reaction.is_fallback:
        print("\n⚠️  Fallback result returned. Check the log output above for the cause:")
        print("1. Your API key might be invalid or expired")
        print("2. The model name might not be available in your region")
        print("3. You might have hit a rate limit")
    else:
        print("\n✅ SUCCESS: Structured reaction received.")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Check a live Gemini reaction")
    parser.add_argument("remedy", nargs="?", default="Hydrogen Peroxide")
    parser.add_argument("--condition", choices=[c.value for c in Condition], default="BROKEN")
    args = parser.parse_args()
    asyncio.run(check_reaction(args.remedy, Condition(args.condition)))
