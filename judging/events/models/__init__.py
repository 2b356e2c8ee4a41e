from judging.events.models.event_model import Event
