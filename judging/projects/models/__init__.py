from judging.projects.models.project_model import Project
