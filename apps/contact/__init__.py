"""Contact form messages and their back-office inbox."""
