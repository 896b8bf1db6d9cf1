GREETING_PROMPT = (
    "Create a kawaii, uwu and cute morning greeting in Russian, including information "
    "about the weather for the day for: {names}. Weather: {weather}. "
    "Include a suggestion on how to dress appropriately for the weather and etc. "
    "The response should be a direct greeting, without any explanations or additional details."
)


def build_prompt(names, weather, template=GREETING_PROMPT):
    """Fill the greeting template with comma-joined names and the weather line."""
    return template.replace("{names}", ", ".join(names)).replace("{weather}", weather)
