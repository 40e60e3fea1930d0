"""vbpcheck - structural checker for Visual Basic 6 projects."""
