# src/tasklark/core/messages.py

"""Fixed user-facing strings shared by the router, the task list and the console."""

from __future__ import annotations

DIVIDER = "_" * 60
INDENT = "  "

WELCOME_MESSAGE = (
    "hey, i'm {app_name}, your glorified task manager.\n"
    "i can keep a list of your todos, events, and deadlines.\n"
    "tell me what you need to keep track of. i'll help you out :)"
)
BYE_MESSAGE = "yeah bye bye to you too human being"

MISSING_DESCRIPTION_MESSAGE = "hmm...a description seems to be missing. try again?"
UNKNOWN_COMMAND_MESSAGE = "hmm... i don't quite recognise that command. try again?"
DUPLICATE_TASK_MESSAGE = "that task is already in your list! no need to add it twice."
SAVE_FAILED_MESSAGE = "uh oh, i couldn't write your tasks to disk. try that again in a bit?"
INTERNAL_ERROR_MESSAGE = "something went wrong on my side while handling that. try again?"

DEADLINE_USAGE = "deadline <description> /by <when>"
EVENT_USAGE = "event <description> /from <start> /to <end>"

LIST_HEADER = "here's everything that's in your list:"
EMPTY_LIST_MESSAGE = "your list is empty. add a todo, deadline or event!"
FIND_HEADER = "here are the matching tasks in your list:"
NO_MATCHES_MESSAGE = "couldn't find any task matching '{term}'."

MISSING_STORE_PROMPT = (
    "i couldn't find a saved task list. you will need to create one to continue using me.\n"
    "would you like to create one? (y/n)"
)
STORE_CREATED_MESSAGE = "save file created! ok, i'm all ears now. tell me what you need."
STORE_CREATE_FAILED_MESSAGE = "oof, i couldn't create the file. i'll exit first - try restarting me!"
STORE_DECLINED_MESSAGE = "alright then. cya ;)"
PROMPT_NOT_UNDERSTOOD_MESSAGE = "didn't quite understand what you said there. try again?"
STARTUP_FAILED_MESSAGE = "hmmm... i ran into an issue while setting up. try launching me again."


def malformed_message(usage: str) -> str:
    return f"hmm... i couldn't make sense of that. the format is: {usage}"
