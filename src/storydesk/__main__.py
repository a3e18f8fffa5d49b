"""Allow ``python -m storydesk``."""

from storydesk.cli import main

if __name__ == "__main__":
    main()
