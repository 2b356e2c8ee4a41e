from judging.judges.models.judge_model import Judge
