# =============================================================================
# main.py  —  Run the Quillopy documentation assistant from a checkout
# =============================================================================
#
#   uv run python main.py                 interactive
#   uv run python main.py --ask "..."     one question
#
# Needs the agent extra:  pip install -e ".[agent]"
# Installed equivalent:   quillopy-agent
# =============================================================================

from agent.console import main

if __name__ == "__main__":
    main()
