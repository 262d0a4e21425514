"""Example usage of RetrievalEngine.

This example runs the engine with the in-memory mocks, so no model download
or data directory is required. Swap HashingEmbeddingProvider for
SentenceTransformerProvider (the default) to use a real multilingual model.
"""

import asyncio
import logging

from intent_rag import IntentTemplate, RAGConfig, RetrievalEngine
from intent_rag.mocks import HashingEmbeddingProvider


async def example_basic_usage():
    """Basic usage example."""
    print("=== Basic Usage Example ===")

    config = RAGConfig(enable_persistence=False)
    async with RetrievalEngine(config, embedding_provider=HashingEmbeddingProvider()) as engine:
        for text in ["check my points", "查看积分", "add device iPhone-16", "add device", "weather"]:
            result = await engine.query(text)
            action = result.matched_intent.action if result.matched_intent else "-"
            print(f"[{result.language.value}] {text!r} -> {action} ({result.execution_time_ms:.1f} ms)")
            print(f"    {result.response}")


async def example_custom_template():
    """Example of extending the catalog."""
    print("\n=== Custom Template Example ===")

    config = RAGConfig(enable_persistence=False)
    engine = RetrievalEngine(config, embedding_provider=HashingEmbeddingProvider())
    engine.add_template(IntentTemplate(
        id="reboot_device",
        action="rebootDevice",
        category="device",
        description={"en": "Reboot a device"},
        templates={"en": ["reboot device", "restart device"]},
        parameters=("deviceName",),
    ))

    await engine.initialize()
    try:
        result = await engine.query("restart device")
        print(f"Matched: {result.matched_intent.action}")
        print(f"Response: {result.response}")

        stats = engine.get_stats()
        print(f"Templates: {stats['total_templates']}, indexed phrases: {stats['total_intents']}")
    finally:
        await engine.dispose()


async def main():
    """Run all examples."""
    logging.basicConfig(level=logging.WARNING)
    await example_basic_usage()
    await example_custom_template()


if __name__ == "__main__":
    asyncio.run(main())
