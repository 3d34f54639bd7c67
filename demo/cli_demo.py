#!/usr/bin/env python3
"""
Interactive CLI demo for Agent Router.

Type a chat message and see which agent it is routed to, how the decision
was made and with what confidence.
"""
import argparse
import logging
import sys

from agent_router.app import AgentRouterApp
from agent_router.config_loader import load_config_from_env


def print_banner():
    """Print welcome banner."""
    print("\n" + "=" * 60)
    print("  Agent Router - Interactive CLI Demo")
    print("=" * 60)
    print("\nType a message to see where it would be routed:")
    print("  • KNOWLEDGE_QA   policies, documents, processes")
    print("  • DATA_ANALYSIS  sales, statistics, trends, reports")
    print("  • GENERAL_CHAT   greetings and everything else")
    print("\nType 'stats' for cache statistics, 'quit' or 'exit' to end.")
    print("-" * 60 + "\n")


def print_result(result, message):
    """Print formatted routing decision."""
    print(f"\n💬 Message: {message}")
    print(f"🧭 Agent: {result.agent_type.value}")
    print(f"🔧 Method: {result.method.value}")
    print(f"📊 Confidence: {result.confidence}")
    if result.keywords:
        print(f"🔑 Keywords: {', '.join(result.keywords)}")
    print("-" * 60)


def setup_app(no_cache: bool = False) -> AgentRouterApp:
    """Load configuration and initialize the router."""
    print("🚀 Initializing Agent Router...")
    config = load_config_from_env()
    if no_cache:
        config.cache_enabled = False

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )

    app = AgentRouterApp(config)
    app.initialize()
    print("✅ Ready!\n")
    return app


def main(argv=None):
    """Main CLI loop."""
    parser = argparse.ArgumentParser(description="Route chat messages interactively.")
    parser.add_argument("--no-cache", action="store_true", help="disable the intent cache")
    args = parser.parse_args(argv)

    print_banner()

    try:
        app = setup_app(no_cache=args.no_cache)
    except Exception as e:
        print(f"\n❌ Failed to initialize router: {e}")
        print("Please check your environment variables and configuration.")
        return 1

    while True:
        try:
            message = input("You: ").strip()

            if not message:
                continue

            if message.lower() in ['quit', 'exit', 'q']:
                print("\n👋 Goodbye!\n")
                break

            if message.lower() == 'stats':
                print(f"\n📈 {app.cache_stats_summary()}")
                print("-" * 60)
                continue

            print_result(app.route(message), message)

        except KeyboardInterrupt:
            print("\n\n👋 Interrupted. Goodbye!\n")
            break
        except EOFError:
            print("\n\n👋 Goodbye!\n")
            break

    return 0


if __name__ == "__main__":
    sys.exit(main())
