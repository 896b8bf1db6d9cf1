def mention(recipient_id):
    return f"<@{recipient_id}>"


def format_message(recipients, generated_message):
    """Append one mention per recipient, in order, on a new line."""
    mentions = " ".join(mention(recipient_id) for _, recipient_id in recipients)
    return f"{generated_message}\n{mentions}"
