"""Worked solutions to course topics, from quizzes and errors to traits and threads."""