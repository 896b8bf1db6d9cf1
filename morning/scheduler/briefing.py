from morning.bot.message import format_message
from morning.core.greeter import generate_greeting
from morning.integrations.discord import send_message
from morning.integrations.open_meteo import fetch_weather


async def send_morning_briefing(settings, http=None, llm=None):
    """
    One briefing run:
    1. Validates the required Discord settings
    2. Fetches current weather (Open-Meteo), falling back to a fixed phrase
    3. Calls the local LLM to write the greeting
    4. Appends mentions and posts to the Discord channel

    Returns the message that was sent. Steps 1, 3 and 4 raise on failure.
    """
    settings.validate()
    recipients = settings.recipients

    try:
        weather_info = await fetch_weather(settings, client=http)
        print(f"  [weather] {weather_info}")
    except Exception as e:
        weather_info = settings.weather_fallback
        print(f"  [weather] unavailable, using fallback: {e}")

    generated_message = await generate_greeting(settings, recipients, weather_info, client=llm)
    final_message = format_message(recipients, generated_message)

    await send_message(settings.discord_token, settings.channel_id, final_message, client=http)
    return final_message
