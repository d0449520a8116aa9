from life_duel.cli import main

main()
