import sys

from simplelang.util import Colors, Span


# Class used to create messages, which can be communicated to the programmer
class Communicator:

    # Creates an appropriate message string from the given arguments
    @staticmethod
    def create_message(
        program: str,
        span: Span,
        class_name="CompilerError",
        before: str = "",
        after: str = "",
        n_before: int = 1,
        n_after: int = 1,
        color=Colors.RED,
    ) -> str:
        # Only "\n" starts a new line for the lexer, unlike str.splitlines
        lines = program.split("\n")
        start_line_no = max(1, span.start_ln - n_before)
        error_lines = lines[start_line_no - 1 : span.end_ln + n_after]
        end_line_no = start_line_no + len(error_lines) - 1

        final_error_lines = []
        for i, line in enumerate(error_lines, start=start_line_no):
            # Right-align the line numbers, e.g.
            #    9. x = 1;
            # -> 10. int 5;
            padding = " " * (len(str(end_line_no)) - len(str(i)))
            if not span.start_ln <= i <= span.end_ln:
                final_error_lines.append(f"   {padding}{i}. {line}")
                continue

            # Only color inside the span on the first and last line
            start_col = span.start_col if i == span.start_ln else 0
            end_col = span.end_col if i == span.end_ln else len(line)
            final_error_lines.append(
                f"-> {padding}{i}. {line[:start_col]}"
                f"{color}{line[start_col:end_col]}{Colors.ENDC}"
                f"{line[end_col:]}"
            )

        message = class_name + ": " + before
        if final_error_lines:
            message += "\n" + "\n".join(final_error_lines)
        if after:
            message += "\n" + after
        return message

    # Communicates all errors to the programmer
    # In case of any errors, the front end will stop with an exception
    @staticmethod
    def communicate(stage_of_exception) -> None:
        errors = "".join(["\n\n" + str(error) for error in ErrorRaiser.ERRORS])
        if errors:
            sys.tracebacklimit = -1
            ErrorRaiser.ERRORS.clear()
            raise stage_of_exception(errors)


# Used to store the accumulated errors until they are communicated
class ErrorRaiser:
    ERRORS = []
