from speecheval.cli import main

main()
