from customroles.program import main

main()
