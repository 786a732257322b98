"""Pure assessment logic: question bank loading and grading."""
