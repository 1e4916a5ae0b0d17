# =============================================================================
# agent/console.py  —  Terminal front end for the documentation assistant
# =============================================================================
#
# Runs the ADK agent (agent/docs_agent.py) against the Quillopy tool server
# and shows what happened at the tool boundary:
#
#   🔧 quillopy_search(package_name='pandas', language='python', ...)
#   📄 the exact text the server returned (trimmed to a preview)
#   🤖 the agent's final answer
#
# Seeing the raw tool text next to the answer makes it obvious whether the
# agent cited the documentation or answered from memory.
#
# USAGE:
#   quillopy-agent                          interactive loop
#   quillopy-agent --ask "@quillopy[pandas] read a csv"   one question, then exit
# =============================================================================

import argparse
import asyncio
from typing import Any, Optional

PREVIEW_CHARS = 600


def describe_tool_call(name: str, args: Optional[dict[str, Any]]) -> str:
    """One-line rendering of a tool call, arguments in a stable order."""
    arg_str = ", ".join(f"{key}={value!r}" for key, value in sorted((args or {}).items()))
    return f"{name}({arg_str})"


def tool_result_text(response: Any) -> str:
    """Pull the text out of an MCP tool response as ADK reports it.

    ADK hands back the MCP CallToolResult either dumped to a dict
    ({"content": [{"type": "text", "text": ...}]}), wrapped as
    {"result": ...}, or as the model object itself.
    """
    if response is None:
        return ""
    if isinstance(response, str):
        return response
    if isinstance(response, dict):
        if "content" in response:
            return _content_text(response["content"])
        if "result" in response:
            return tool_result_text(response["result"])
        return ""
    content = getattr(response, "content", None)
    if content is not None:
        return _content_text(content)
    return str(response)


def _content_text(content: Any) -> str:
    if not isinstance(content, list):
        return ""
    texts = []
    for item in content:
        if isinstance(item, dict):
            text = item.get("text")
        else:
            text = getattr(item, "text", None)
        if isinstance(text, str):
            texts.append(text)
    return "\n".join(texts)


def preview(text: str, limit: int = PREVIEW_CHARS) -> str:
    if len(text) <= limit:
        return text
    return text[:limit].rstrip() + f"\n… ({len(text) - limit} more chars)"


async def ask(runner, session_id: str, user_id: str, question: str) -> str:
    """Send one question through the agent, printing tool traffic as it streams."""
    from google.genai import types

    message = types.Content(role="user", parts=[types.Part(text=question)])

    answer = ""
    async for event in runner.run_async(
        user_id=user_id,
        session_id=session_id,
        new_message=message,
    ):
        if not (event.content and event.content.parts):
            continue
        for part in event.content.parts:
            call = getattr(part, "function_call", None)
            if call:
                print(f"  🔧 {describe_tool_call(call.name, call.args)}")

            result = getattr(part, "function_response", None)
            if result:
                text = tool_result_text(result.response)
                print(f"  📄 {result.name} returned:\n")
                print("     " + preview(text).replace("\n", "\n     ") + "\n")

            if getattr(part, "text", None):
                answer = part.text

    return answer


async def run_console(question: Optional[str] = None) -> None:
    from google.adk.runners import Runner
    from google.adk.sessions import InMemorySessionService

    from agent.docs_agent import AGENT_NAME, create_agent

    user_id = "console_user"
    session_service = InMemorySessionService()
    runner = Runner(agent=create_agent(), app_name=AGENT_NAME, session_service=session_service)
    session = await session_service.create_session(app_name=AGENT_NAME, user_id=user_id)

    if question:
        print(await ask(runner, session.id, user_id, question) or "⚠️  No answer.")
        return

    print("💬 Ask about any library (e.g. @quillopy[pandas] how do I read a csv?)")
    print("   Type 'quit' to exit.")
    while True:
        try:
            user_input = input("\n🧑 ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if user_input.lower() in ("quit", "exit", "q"):
            break
        if not user_input:
            continue

        answer = await ask(runner, session.id, user_id, user_input)
        print(f"\n🤖 {answer}" if answer else "\n⚠️  No answer. Check the server log on stderr.")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Quillopy documentation assistant")
    parser.add_argument("--ask", metavar="QUESTION", help="Ask one question and exit")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    from dotenv import load_dotenv

    # LiteLlm reads its API key from the environment when the agent is built.
    load_dotenv()
    args = parse_args(argv)
    asyncio.run(run_console(args.ask))
