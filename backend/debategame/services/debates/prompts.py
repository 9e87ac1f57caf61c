"""Prompt templates for the argument judge."""

SYSTEM_PROMPT = (
    "You are an impartial judge in a debate between two opposing sides. "
    "You answer only with a JSON object."
)

SCORE_WITH_CONTEXT = (
    "Score the following argument from 0 to 100.\n\n"
    "Argument:\n{argument}\n\n"
    "It responds to this previous argument:\n{previous_argument}\n\n"
    "Weigh relevance, clarity, evidence, and persuasiveness, including how well "
    "it answers the previous argument. "
    'Return your answer as a JSON object of the form {{"score": 0}}. '
    "Do not include anything other than the JSON object in your response."
)

SCORE_WITHOUT_CONTEXT = (
    "Score the following argument from 0 to 100.\n\n"
    "Argument:\n{argument}\n\n"
    "Weigh relevance, clarity, evidence, and persuasiveness. "
    'Return your answer as a JSON object of the form {{"score": 0}}. '
    "Do not include anything other than the JSON object in your response."
)


def build_score_prompt(argument, previous_argument=None):
    if previous_argument:
        return SCORE_WITH_CONTEXT.format(argument=argument, previous_argument=previous_argument)
    return SCORE_WITHOUT_CONTEXT.format(argument=argument)
