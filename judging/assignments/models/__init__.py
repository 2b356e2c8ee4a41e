from judging.assignments.models.judge_event_model import JudgeEvent
