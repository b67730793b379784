"""
Oracle: Entry Point
Supports CLI mode and web server mode.

Usage:
    python app.py --web                  # Launch the API server (default)
    python app.py --question "..."       # Ask a single question
    python app.py --interactive          # Interactive CLI mode
    python app.py --backend openai       # Answer with the OpenAI backend first
"""

import argparse
from pathlib import Path


def main():
    parser = argparse.ArgumentParser(
        description="Oracle: Q&A assistant for internal processes"
    )
    parser.add_argument(
        "--web", action="store_true", default=True,
        help="Launch the web API (default)"
    )
    parser.add_argument(
        "--question", "-q", type=str, default=None,
        help="Ask a single question from the command line"
    )
    parser.add_argument(
        "--interactive", "-i", action="store_true",
        help="Run in interactive CLI mode"
    )
    parser.add_argument(
        "--backend", type=str, default=None,
        help="LLM backend: offline | openai"
    )
    parser.add_argument(
        "--knowledge-base", type=Path, default=None,
        help="Path to the processes JSON file"
    )
    parser.add_argument(
        "--port", type=int, default=None,
        help="Port for the web server (default: 5000)"
    )

    args = parser.parse_args()

    from config import WEB_DEBUG, WEB_HOST, WEB_PORT
    from core.assistant import OracleAssistant
    from core.logging_config import setup_logging

    setup_logging()

    assistant = OracleAssistant(
        knowledge_base_path=args.knowledge_base,
        llm_backend_name=args.backend,
    )
    assistant.initialize()

    # Single question mode
    if args.question:
        result = assistant.ask(args.question)
        print(f"\nQ: {result['question']}")
        print(f"\n[{result['categoria']}] {result['titulo']}")
        print(f"\n{result['answer']}")
        return

    # Interactive CLI mode
    if args.interactive:
        print("\n=== Interactive Mode (type 'sair' to exit) ===\n")
        while True:
            try:
                question = input("Você: ").strip()
                if question.lower() in ("sair", "quit", "exit", "q"):
                    print("Até logo!")
                    break
                if not question:
                    continue

                result = assistant.ask(question)
                print(f"\nOráculo: {result['answer']}")
                print()
            except KeyboardInterrupt:
                print("\nAté logo!")
                break
        return

    # Web mode (default)
    from frontend.server import create_app

    port = args.port or WEB_PORT
    app = create_app(assistant)
    print(f"\n🌐 Starting web server at http://{WEB_HOST}:{port}")
    print("   Press Ctrl+C to stop.\n")
    app.run(host=WEB_HOST, port=port, debug=WEB_DEBUG)


if __name__ == "__main__":
    main()
