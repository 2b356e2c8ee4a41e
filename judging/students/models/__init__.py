from judging.students.models.student_model import Student
