import os
import subprocess

def _clear_screen() -> None:
    '''
    Limpa o console ("cls" no Windows, "clear" nos demais) e espera o comando
    terminar antes de retornar.
    '''

    if os.name == "nt":
        subprocess.run("cls", shell=True, check=False)
    else:
        subprocess.run(["clear"], check=False)
