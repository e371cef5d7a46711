"""Pure state machines: content assembly, navigation, quiz, advance scheduling."""
