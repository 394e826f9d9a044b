"""The shell's command names and their help texts."""

from __future__ import annotations

NOT_FOUND = "Comando no encontrado. Usa help para ver la lista."

_HELP: dict[str, str] = {
    "authors": "Prints the names and logins of the program authors. authors -l prints only the logins and authors -n prints only the names",
    "pid": "Prints the pid of the process executing the shell. pid -p rints the pid of the shell s parent process.",
    "chdir": "Changes the current working directory of the shell to dir (using the chdir system call). When invoked without auguments it prints the current working directory.",
    "date": "Prints the current date in the format DD/MM/YYYY",
    "time": "Prints the current time in the format hh:mm:ss.",
    "hist": "Shows/clears the historic of commands executed by this shell. -hist Prints all the comands that have been input with their order number -hist -c Clears (empties) the list of historic commands -hist -N Prints the first N comands",
    "comand": "Repeats command number N (from historic list)",
    "open": "Opens a file and adds it (together with the file descriptor and the opening mode to the list of shell open files",
    "close": "Closes the df file descriptor and eliminates the corresponding item from the list",
    "dup": "Duplicates the df file descriptor (using the dup system call, creating the corresponding new entry on the file list",
    "listopen": "Lists the shell open files. For each file it lists its descriptor, the file name and the opening mode. The shell will inherit from its parent process open descriptors 0, 1 and 2.",
    "infosys": "Prints information on the machine running the shell (as obtained via the uname system call/library function)",
    "quit": "Ends the shell",
    "exit": "Ends the shell",
    "bye": "Ends the shell",
    "help": "Help displays a list of available commands. help cmd gives a brief help on the usage of comand cmd",
    "create": "create [-f] [name]    Crea un directorio o un fichero (-f)",
    "stat": "stat [-long][-link][-acc] name1 name2 ..    lista ficheros;\n\t-long: listado largo\n-acc: acesstime\n\t-link: si es enlace simbolico, el path contenido",
    "list": "list [-reca] [-recb] [-hid][-long][-link][-acc] n1 n2 ..    lista contenidos de directorios\n\t-hid: incluye los ficheros ocultos\n\t-recb: recursivo (antes)\n\t-reca: recursivo (despues)\nresto parametros como stat",
    "delete": "delete [name1 name2 ..]    Borra ficheros o directorios vacios",
    "deltree": "deltree [name1 name2 ..]    Borra ficheros o directorios no vacios recursivamente",
}


def command_names() -> tuple[str, ...]:
    """Every command the shell knows, in the order help lists them."""
    return tuple(_HELP)


def help_text(name: str | None = None) -> str:
    """Help for one command, or the list of all commands when name is None.

    Raises KeyError for a command that does not exist.
    """
    if name is None:
        return "".join(f"{command}  " for command in _HELP) + "\n"
    try:
        return _HELP[name]
    except KeyError:
        raise KeyError(NOT_FOUND) from None